from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Optional, List


class Token(BaseModel):
    id: str
    name: str
    symbol: str


class Pool(BaseModel):
    id: str
    createdAtTimestamp: int
    token0: Token
    token1: Token


class GraphQLError(BaseModel):
    message: str


class PoolsData(BaseModel):
    pools: List[Pool]


class GraphQLResponse(BaseModel):
    """Envelope every subgraph response shares; ``data`` is checked per query."""
    data: Optional[Any] = None
    errors: Optional[List[GraphQLError]] = None


class PoolsResponse(BaseModel):
    data: Optional[PoolsData] = None


class ContractTag(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    contract_address: str = Field(alias="Contract Address")
    public_name_tag: str = Field(alias="Public Name Tag")
    project_name: str = Field(alias="Project Name")
    ui_website_link: str = Field(alias="UI/Website Link")
    public_note: str = Field(alias="Public Note")

    def as_record(self) -> dict:
        return self.model_dump(by_alias=True)
