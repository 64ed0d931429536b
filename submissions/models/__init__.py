from .submission import User, ContactMessage

__all__ = ["User", "ContactMessage"]
