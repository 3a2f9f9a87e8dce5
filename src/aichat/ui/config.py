"""UI configuration constants.

Centralizes user-facing strings and sizes for the UI module.
"""

# Chat display
EMPTY_CONVERSATION_TEXT = "Start a conversation with ChatGPT"
INPUT_PLACEHOLDER = "Type a message..."
API_KEY_HINT = "Configure your API key in settings to begin"
ERROR_PREFIX = "Error: "

# Settings dialog
SETTINGS_TITLE = "Settings"
API_KEY_PLACEHOLDER = "Enter your API key"
API_KEY_HELP_TEMPLATE = "Enter your API key for {provider}"

# Header
TITLE_TEMPLATE = "Chat with {provider}"
