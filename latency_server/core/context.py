from contextvars import ContextVar


# Holds the per-request id used to pair start/end timing lines
request_id_var: ContextVar[str] = ContextVar("request_id", default="-")
