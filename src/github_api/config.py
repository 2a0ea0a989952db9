from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class RequestOptions(BaseModel):
    model_config = ConfigDict(extra="allow")

    protocol: Literal["http", "https"] = Field(default="http")
    url: str = Field(default=":protocol://github.com/api/v2/:format/:path")
    format: Literal["json", "text"] = Field(default="json")
    user_agent: str = Field(
        default="github-api-client (https://github.com/ornicar/php-github-api)"
    )
    timeout: float = Field(default=20)
    login: str | None = None
    token: str | None = None
    debug: bool = False

    def build_url(self, route: str) -> str:
        return (
            self.url.replace(":protocol", self.protocol)
            .replace(":format", self.format)
            .replace(":path", route.strip("/"))
        )
