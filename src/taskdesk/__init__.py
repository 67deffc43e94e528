"""Single-user to-do list with a JSON task file and a console front-end."""
