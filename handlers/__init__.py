"""
handlers/ - Presentation Layer
================================
Telegram bot handlers. Each handler receives updates from Telegram,
pulls the AppContext out of `bot_data`, delegates to the DispatchService
or a repository, and sends the response back to the chat.
No translation logic lives here.
"""
