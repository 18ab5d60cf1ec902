from fastapi import HTTPException, Request, status

from todo_api.config import get_settings


def get_session_id(request: Request) -> str:
    """Get the client session id from the request.

    The id is an opaque string generated and persisted by the browser. It is
    trusted as-is; there is no authentication behind it. The configured
    header is preferred, with the query parameter as a fallback for older
    clients.
    """
    settings = get_settings()
    session_id = request.headers.get(settings.session_header)
    if not session_id:
        session_id = request.query_params.get(settings.session_query_param)

    if not session_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Session ID is required",
        )

    return session_id
