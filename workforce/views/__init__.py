# Page bodies shared by the role-specific scripts under pages/.
# Each module exposes render(auth, api).
