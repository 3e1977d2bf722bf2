"""
Credentials used to connect the log sink to an Elasticsearch cluster.
"""
from pydantic import BaseModel, ConfigDict, Field


class ElasticsearchCredentials(BaseModel):
    """Connection details stored as JSON in Secrets Manager."""
    model_config = ConfigDict(populate_by_name=True)

    uri: str = Field(..., alias="Uri", min_length=1, description="Elasticsearch endpoint URI")
    username: str = Field(..., alias="Username", description="Basic authentication user")
    password: str = Field(..., alias="Password", repr=False, description="Basic authentication password")
