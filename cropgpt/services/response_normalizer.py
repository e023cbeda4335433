import json
import re
from typing import Union

from cropgpt.models.query_failure import FailureStage, ParsedResponse, QueryFailure

# Opening or closing fence, with an optional language tag such as ```json
CODE_FENCE_PATTERN = re.compile(r"```[A-Za-z0-9_+-]*")


def strip_code_fences(text: str) -> str:
    return CODE_FENCE_PATTERN.sub("", text).strip()


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


def normalize_response(raw_text: str) -> Union[ParsedResponse, QueryFailure]:
    """
    Turns raw model text into a JSON value.

    Code fences are removed wherever they appear and the rest is parsed as
    strict JSON (NaN and Infinity are refused). Malformed JSON is not repaired.

    Args:
        raw_text: The text returned by the model.

    Returns:
        A ParsedResponse, or a QueryFailure carrying the raw text if the reply
        is not valid JSON.
    """
    if not isinstance(raw_text, str):
        return QueryFailure(
            stage=FailureStage.NORMALIZATION,
            detail=f"Model reply is {type(raw_text).__name__}, not text",
            raw_text=repr(raw_text),
        )

    try:
        value = json.loads(strip_code_fences(raw_text), parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        return QueryFailure(
            stage=FailureStage.NORMALIZATION,
            detail=f"Reply is not valid JSON: {e.msg} at position {e.pos}",
            raw_text=raw_text,
        )
    except (ValueError, RecursionError) as e:
        return QueryFailure(
            stage=FailureStage.NORMALIZATION,
            detail=f"Reply is not valid JSON: {e}",
            raw_text=raw_text,
        )
    return ParsedResponse(value=value)
