from typing import Literal

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Liveness payload. Deliberately outside the envelope: probes only read the status."""

    status: Literal["ok"] = "ok"
