"""Response fragments shared by several use cases."""

from pydantic import BaseModel

from inkwell.domain.model import User


class AuthorSummary(BaseModel):
    """Public fields of an account shown next to its content."""

    user_id: str
    username: str | None = None
    fullname: str | None = None
    profile_img: str | None = None

    @classmethod
    def of(cls, user_id: object, user: User | None) -> "AuthorSummary":
        """Build a summary, tolerating accounts missing from the directory."""
        if user is None:
            return cls(user_id=str(user_id))
        return cls(
            user_id=str(user.id),
            username=user.username.root,
            fullname=user.fullname,
            profile_img=user.profile_img,
        )
