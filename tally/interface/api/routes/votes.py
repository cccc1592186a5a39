"""Vote routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from tally.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
)
from tally.domain.error import BusinessRuleViolationError, RegistrationError
from tally.interface.error import SUBMIT_VOTE_FAILED_MESSAGE, error_response

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


@router.post("/vote", response_model=CastVoteResponse)
async def cast_vote(
    request: CastVoteRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
) -> CastVoteResponse | JSONResponse:
    """Cast a vote for a submission in a category.

    Args:
        request: Vote payload
        cast_vote_use_case: Cast vote use case from DI

    Returns:
        Success message, or a JSON error body:
        409 when the vote limit is reached or the vote is a duplicate,
        500 when a record could not be ensured or anything else failed
    """
    logfire.info(
        "Received vote",
        submission_id=request.submission_id,
        slack_id=request.slack_id,
        category=request.category,
    )

    try:
        return await cast_vote_use_case.execute(request)
    except BusinessRuleViolationError as e:
        return error_response(status.HTTP_409_CONFLICT, str(e))
    except RegistrationError as e:
        logfire.error(str(e))
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))
    except Exception:
        logfire.exception("Error processing vote submission")
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, SUBMIT_VOTE_FAILED_MESSAGE
        )
