"""HTTP error bodies shared by the interface layer."""

from fastapi.responses import JSONResponse

NOT_FOUND_MESSAGE = "Not Found"
SUBMIT_VOTE_FAILED_MESSAGE = "Failed to submit vote"


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build the JSON error body used by every endpoint.

    Args:
        status_code: HTTP status code
        message: Human readable error message

    Returns:
        JSON response of the form {"error": message}
    """
    return JSONResponse(status_code=status_code, content={"error": message})
