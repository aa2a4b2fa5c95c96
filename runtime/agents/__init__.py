"""
Agents used by the Oracle runtime.

- ConversationAgent: one ask turn (transcript in, speech + transcript out)
- RequestRouter: maps launch / intent / session-ended requests to replies
"""
