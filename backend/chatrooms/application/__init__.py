"""
APPLICATION LAYER - Use Cases & Orchestration

This layer contains:
- services/  → ChatCoordinator, cross-store orchestration
- dto/       → Read projections handed to the transport layer

Rules:
- Depends on Domain layer only
- No HTTP/framework code here
- Coordinates entities and repositories
"""
