"""Helpers shared by the API tests."""

USER_FIELDS = "id name email"

CREATE_USER = f"""
mutation CreateUser($name: String!, $email: String!) {{
  createUser(name: $name, email: $email) {{ {USER_FIELDS} }}
}}
"""

GET_USER = f"""
query GetUser($id: ID!) {{
  user(id: $id) {{ {USER_FIELDS} }}
}}
"""

LIST_USERS = f"query {{ users {{ {USER_FIELDS} }} }}"

USER_BY_EMAIL = f"""
query UserByEmail($email: String!) {{
  userByEmail(email: $email) {{ {USER_FIELDS} }}
}}
"""

DELETE_USER = f"""
mutation DeleteUser($id: ID!) {{
  deleteUser(id: $id) {{ {USER_FIELDS} }}
}}
"""


def error_messages(envelope: dict) -> list[str]:
    return [error["message"] for error in envelope.get("errors") or []]
