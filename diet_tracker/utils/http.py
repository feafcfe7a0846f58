from typing import Any, Dict, Optional
from flask import request, jsonify


def ok(payload: Any, status: int = 200):
    return jsonify(payload), status


def error(message: str, status: int = 400):
    body: Dict[str, Any] = {"error": message}
    return jsonify(body), status


def json_body() -> Dict[str, Any]:
    # Try parsing as JSON first (force=True allows missing Content-Type header)
    data = request.get_json(force=True, silent=True)
    if isinstance(data, dict):
        return data
    # Fallback to form data (converted to dict) if JSON parsing fails
    return request.form.to_dict() if request.form else {}


def arg_str(name: str, default: Optional[str] = None) -> Optional[str]:
    val = request.args.get(name)
    if val is None or not val.strip():
        return default
    return val.strip()
