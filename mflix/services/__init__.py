from mflix.services.auth import AuthService, HashedPassword, PlainPassword
from mflix.services.comments import CommentService
from mflix.services.reporting import ReportingService

__all__ = ["AuthService", "HashedPassword", "PlainPassword", "CommentService", "ReportingService"]
