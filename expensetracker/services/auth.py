from ..errors import Unauthenticated
from ..log import get_logger
from ..models import User, UserRecord

log = get_logger(__name__)


def validate_user_login(email: str, password_hash: str) -> UserRecord:
    """Return the user whose email and password hash both match exactly.

    Unknown email and wrong hash raise the same error so callers cannot tell
    which part was wrong. ``password_hash`` is compared as-is; hashing happens
    before this is called.
    """
    user = User.query.filter_by(email=email, password_hash=password_hash).first()
    if user is None:
        log.warning("login_failed", email=email)
        raise Unauthenticated("Invalid email or password")
    log.info("login_succeeded", user_id=user.id)
    return user.to_record()
