# Flash messages (utilidad simple guardada en sesión)

from typing import Dict, List
from fastapi import Request


def flash(request: Request, message: str, category: str = "success") -> None:
    flashes = request.session.get("_flashes", [])
    flashes.append({"message": message, "category": category})
    request.session["_flashes"] = flashes


def get_flashed_messages(request: Request) -> List[Dict[str, str]]:
    return request.session.pop("_flashes", [])
