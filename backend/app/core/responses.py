"""Response Envelope — uniform success shape for every API operation.

Invariants:
    - Success bodies are {"statusCode", "message", "data"}; statusCode mirrors the HTTP status
    - Error bodies are produced by FolioError.to_response(), never here
"""


def build_response(status_code: int, message: str, data: object = None) -> dict:
    """Wrap operation output in the success envelope."""
    return {"statusCode": status_code, "message": message, "data": data}
