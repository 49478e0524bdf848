import logging
import re
from typing import Any

# Emitted in this order after level/logger/event: who called (tool), what
# went over the wire, then how it went.
LOG_EXTRA_FIELDS = (
    "tool",
    "method",
    "endpoint",
    "url",
    "status",
    "attempt",
    "duration_ms",
    "error_type",
)

# YouTrack permanent tokens: "perm:" or "perm-" followed by base64ish segments.
_PERMANENT_TOKEN_RE = re.compile(r"\bperm[:-][A-Za-z0-9+/=._-]+")


def redact_tokens(text: str) -> str:
    """
    >>> redact_tokens("Authorization: Bearer perm:cm9vdA==.NDgtMQ==.abc")
    'Authorization: Bearer perm:***'
    """
    return _PERMANENT_TOKEN_RE.sub(lambda m: m.group(0)[:5] + "***", text)


class LogfmtFormatter(logging.Formatter):
    """
    logfmt lines for YouTrack client records. Missing extras are skipped and
    permanent tokens are masked wherever they show up in a value.
    """

    def format(self, record: logging.LogRecord) -> str:
        kv: list[str] = [
            f"level={record.levelname.lower()}",
            f"logger={record.name}",
        ]

        msg = record.getMessage()
        if msg:
            kv.append(f"event={self._fmt_val(msg)}")

        for key in LOG_EXTRA_FIELDS:
            val = getattr(record, key, None)
            if val is None:
                continue
            kv.append(f"{key}={self._fmt_val(val)}")

        if record.exc_info:
            kv.append(f"exc_type={record.exc_info[0].__name__}")

        return " ".join(kv)

    @staticmethod
    def _fmt_val(val: Any) -> str:
        if isinstance(val, (int, float, bool)):
            return str(val)
        s = redact_tokens(str(val))
        if " " in s or "=" in s:
            s = '"' + s.replace('"', '\\"') + '"'
        return s


def setup_logging(level: str = "INFO") -> None:
    """Install logfmt output on the root logger; safe to call more than once."""

    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler()
    handler.setFormatter(LogfmtFormatter())
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))


__all__ = ["setup_logging", "LogfmtFormatter", "LOG_EXTRA_FIELDS", "redact_tokens"]
