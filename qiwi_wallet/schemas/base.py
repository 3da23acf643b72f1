"""Shared base for wallet JSON documents."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class WalletModel(BaseModel):
    """Immutable model whose JSON field names are lower camel case."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_json_body(self) -> dict:
        """Dump as a JSON-ready dict using wire field names."""
        return self.model_dump(mode="json", by_alias=True)
