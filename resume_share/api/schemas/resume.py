from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Any, Dict, List, Optional


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ResumeSaveRequestDTO(BaseModel):
    resume: Optional[Dict[str, Any]] = None


class ToggleRequestDTO(BaseModel):
    enable: bool


class TemplateRequestDTO(BaseModel):
    template: str = Field(..., min_length=1)


class ResumeInfoDTO(CamelModel):
    url: str
    use_github: bool
    open_share: bool


class PubResumeDTO(CamelModel):
    resume: Dict[str, Any] = {}
    github: Dict[str, bool] = {}
    template: str
    use_github: bool
    open_share: bool
    github_login: Optional[str] = None
    updated_at: Optional[str] = None


class ShareStatusDTO(CamelModel):
    github: Dict[str, bool] = {}
    template: str
    open_share: bool
    use_github: bool
    resume_hash: str
    url: str
    github_url: Optional[str] = None


class ViewDeviceDTO(BaseModel):
    platform: str
    browser: str
    count: int


class ViewSourceDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    source: str = Field(..., alias="from")
    count: int


class PageViewDTO(BaseModel):
    date: str
    count: int


class ShareRecordsDTO(CamelModel):
    url: str
    open_share: bool
    view_devices: List[ViewDeviceDTO] = []
    view_sources: List[ViewSourceDTO] = []
    page_views: List[PageViewDTO] = []
