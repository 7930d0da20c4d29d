"""
DOMAIN LAYER - Chat rooms, users and messages

This layer contains:
- Entities: Business objects with identity (ChatRoom, Message, User)
- Value Objects: Immutable types (Username, RoomId, MessageId)
- Ports: Interfaces that infrastructure implements (UserDirectory, RoomStore)
- Exceptions: Domain-specific errors

RULES:
1. NO framework imports (no FastAPI, Pydantic, etc.)
2. NO I/O operations
3. Only depends on Python stdlib
"""
