def success_response(data=None, message: str | None = None, count: int | None = None) -> dict:
    body = {"success": True}
    if data is not None:
        body["data"] = data
    if message is not None:
        body["message"] = message
    if count is not None:
        body["count"] = count
    return body

def error_response(message: str) -> dict:
    return {"success": False, "message": message}
