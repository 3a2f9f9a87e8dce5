"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
The settings dialog keeps its own CSS next to its screen class.
"""

APP_CSS = """
Screen {
    layout: vertical;
    background: $background;
}

/* Title row with the settings button */
#toolbar {
    height: 3;
    padding: 0 1;
    background: $surface;
    border-bottom: solid $border;
}

#panel-title {
    width: 1fr;
    height: 3;
    content-align: left middle;
    text-style: bold;
    color: $foreground;
}

#settings-btn {
    min-width: 12;
}

/* Conversation */
#message-list {
    height: 1fr;
    background: $panel;
    border: round $primary 60%;
    padding: 0 1;
    scrollbar-gutter: stable;
}

#empty-placeholder {
    width: 100%;
    height: 1fr;
    content-align: center middle;
    color: $text-muted;
}

.message-row {
    width: 100%;
    height: auto;
    margin: 1 0 0 0;

    &.user {
        align-horizontal: right;
    }

    &.assistant {
        align-horizontal: left;
    }
}

.message {
    width: auto;
    max-width: 75%;
    height: auto;
    padding: 0 1;

    &.user-message {
        background: $primary;
        color: white;
    }

    &.assistant-message {
        background: $surface;
        border: round $border;
    }
}

#spinner {
    height: 1;
}

/* Input row */
#chat-input-bar {
    height: auto;
    padding: 1 0 0 0;
}

#chat-input {
    width: 1fr;
}

#send-btn {
    min-width: 10;
    margin-left: 1;
}

#api-key-hint {
    height: auto;
    padding: 0 1;
    color: $error;
}

/* Transient error banner */
#error-banner {
    height: auto;
    margin: 1 0 0 0;
    padding: 1 2;
    background: $error 20%;
    border: round $error;
    color: $foreground;
}
"""
