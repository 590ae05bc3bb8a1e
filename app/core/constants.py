"""
Core constants used across the application. Keep these simple and documented.
"""

# Role prefixes that start a new conversational turn
CONVERSATION_ROLES: tuple[str, ...] = ("User", "Assistant", "Human", "AI")

USER_AGENT_NAME: str = "Kindred"
