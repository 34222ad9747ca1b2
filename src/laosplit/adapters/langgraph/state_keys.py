"""Default state key names for LangGraph integration."""

# Standard state keys used by laosplit nodes
USER_INPUT = "user_input"
LAO_TOKENS = "lao_tokens"
