from mflix.schemas.auth import AuthResult
from mflix.schemas.outcomes import CommenterCount, PostedComment, UpdateOutcome

__all__ = ["AuthResult", "CommenterCount", "PostedComment", "UpdateOutcome"]
