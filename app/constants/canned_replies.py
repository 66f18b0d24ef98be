class CannedReplies:
    """Replies used by responders of kind 'none'."""

    CATALOG = (
        "Hello! How can I help you today?",
        "That's interesting, tell me more.",
        "I'm not sure I follow. Could you rephrase that?",
        "Thanks for sharing!",
        "Good question. Let me think about it.",
        "I hear you.",
        "Could you give me a bit more detail?",
        "Sounds good to me.",
    )
