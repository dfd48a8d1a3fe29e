import hmac


class AccessGate:
    """Admin credential check. An unset username or password locks everyone out."""

    def __init__(self, username: str, password: str):
        self._username = username or ""
        self._password = password or ""

    def __repr__(self) -> str:
        return "AccessGate(configured=%s)" % self.configured

    @property
    def configured(self) -> bool:
        return bool(self._username and self._password)

    def authorize(self, username: str | None, password: str | None) -> bool:
        if not self.configured:
            return False
        if username is None or password is None:
            return False
        # compare both fields every time so timing does not reveal which one failed
        user_ok = hmac.compare_digest(username.encode("utf-8"), self._username.encode("utf-8"))
        pass_ok = hmac.compare_digest(password.encode("utf-8"), self._password.encode("utf-8"))
        return user_ok and pass_ok
