from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class QueryResult(BaseModel):
    """Base for every structured answer parsed out of a model reply.

    Field names on the wire are camelCase, exactly as spelled in the prompts,
    and unknown fields are rejected. Scalar fields use the Strict* types so a
    number is never coerced into a string or the other way round.
    """

    model_config = ConfigDict(alias_generator=to_camel, extra="forbid")
