# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Do NOT commit real secrets (the Telegram bot token). Use:
- .env (local, gitignored)
- bot_token.txt (local, gitignored) as a token fallback
- config_local.py (local safe overrides, gitignored)
"""

ENV_VARS = {
    # App / logging
    "PLANNER_APP_NAME": "App display name (default: planner).",
    "PLANNER_LOG_LEVEL": "Console logging level (default: INFO).",
    # Connectors
    "PLANNER_CONSOLE_ENABLED": "Enable console connector (true/false, default: true).",
    "PLANNER_TELEGRAM_ENABLED": "Enable Telegram connector (true/false, default: false).",
    # Telegram
    "PLANNER_TELEGRAM_TOKEN": "Bot token (TELEGRAM_BOT_TOKEN is accepted too).",
    "PLANNER_TELEGRAM_TOKEN_FILE": "Plain-text token file used when no token is set (default: bot_token.txt).",
    "PLANNER_TELEGRAM_POLL_TIMEOUT": "Long-poll timeout in seconds (default: 60).",
    "PLANNER_TELEGRAM_ALLOWED_CHATS": "Optional allowlist of chat IDs (empty => all chats).",
    # Console
    "PLANNER_CONSOLE_CHAT_ID": "Chat ID used for console input (default: 0).",
    # Paths (gitignored)
    "PLANNER_DATA_DIR": "Local data directory for logs (default: .local/planner).",
    # Conversation policy
    "PLANNER_INVALID_DONE_ID_POLICY": (
        "keep|clear: after a malformed task ID, keep waiting for an ID (default) or return to the menu."
    ),
}
