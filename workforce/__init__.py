# Workforce dashboard package
# Modules:
#   config.py         — settings lookup (st.secrets, then environment) and logging setup
#   models.py         — Role enum and the immutable Session record
#   session_store.py  — durable, file-backed session slot per browser
#   routes.py         — route table and role landing pages
#   guard.py          — pure route-guard decision
#   context.py        — Auth Context and its provider/consumer helpers
#   api.py            — shared REST client (bearer injection, 401 policy)
#   auth.py           — Streamlit bindings for the above, browser-id cookie
#   views/            — page bodies shared by the role-specific page scripts
