from typing import Any, Type, TypeVar, Union

from pydantic import ValidationError

from cropgpt.models.query_failure import FailureStage, QueryFailure
from cropgpt.models.query_result import QueryResult

ResultT = TypeVar("ResultT", bound=QueryResult)


def _summarize_errors(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(loc) for loc in error['loc']) or '<root>'}: {error['msg']}"
        for error in exc.errors()
    )


def validate_contract(
    value: Any, result_model: Type[ResultT]
) -> Union[ResultT, QueryFailure]:
    """Checks a parsed JSON value against the shape of ``result_model``.

    The check is structural only: once every declared field is present with
    the declared kind, values are taken as they are.
    """
    if not isinstance(value, dict):
        return QueryFailure(
            stage=FailureStage.VALIDATION,
            detail=f"Expected a JSON object, got {type(value).__name__}",
        )

    try:
        return result_model.model_validate(value)
    except ValidationError as exc:
        return QueryFailure(
            stage=FailureStage.VALIDATION,
            detail=f"{result_model.__name__}: {_summarize_errors(exc)}",
        )
