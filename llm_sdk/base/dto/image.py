"""Image generation request descriptor and response shape.

Endpoint: ``POST {base_url}/images/generations`` with a JSON body. Only
``dall-e-3`` is supported, which generates exactly one image per call.
"""

from __future__ import annotations

from enum import Enum
from typing import ClassVar, List, Optional

from pydantic import Field, model_validator

from ...config.defaults import IMAGE_DEFAULT_MODEL
from ..request import BodyKind, RequestModel, ResponseModel


class ImageModel(str, Enum):
    DALL_E_3 = IMAGE_DEFAULT_MODEL


class ImageQuality(str, Enum):
    STANDARD = "standard"
    HD = "hd"


class ImageResponseFormat(str, Enum):
    URL = "url"
    B64_JSON = "b64_json"


class ImageSize(str, Enum):
    LARGE = "1024x1024"
    LARGE_WIDE = "1792x1024"
    LARGE_TALL = "1024x1792"


class ImageStyle(str, Enum):
    VIVID = "vivid"
    NATURAL = "natural"


class CreateImageRequest(RequestModel):
    """Image generation request.

    Attributes:
        prompt: Text description of the desired image (max 4000 characters).
        model: Image model.
        n: Number of images, 1 to 10; ``dall-e-3`` accepts only 1.
        quality: ``hd`` for finer detail; ``standard`` otherwise.
        response_format: ``url`` (default upstream) or ``b64_json``.
        size: One of the ``dall-e-3`` sizes.
        style: ``vivid`` leans hyper-real, ``natural`` less so.
        user: End-user identifier for upstream abuse monitoring.

    Raises:
        ValidationError: On out-of-range values or an unsupported ``n`` for the model.
    """

    PATH: ClassVar[str] = "images/generations"
    BODY_KIND: ClassVar[BodyKind] = BodyKind.JSON

    prompt: str = Field(..., min_length=1, max_length=4000)
    model: ImageModel = ImageModel.DALL_E_3
    n: Optional[int] = Field(default=None, ge=1, le=10)
    quality: Optional[ImageQuality] = None
    response_format: Optional[ImageResponseFormat] = None
    size: Optional[ImageSize] = None
    style: Optional[ImageStyle] = None
    user: Optional[str] = None

    @model_validator(mode="after")
    def _validate_n_for_model(self) -> "CreateImageRequest":
        if self.model is ImageModel.DALL_E_3 and self.n is not None and self.n != 1:
            raise ValueError("dall-e-3 only supports n=1")
        return self

    @classmethod
    def new(cls, prompt: str) -> "CreateImageRequest":
        return cls(prompt=prompt)


class ImageObject(ResponseModel):
    b64_json: Optional[str] = None
    url: Optional[str] = None
    # Present when the prompt was revised upstream.
    revised_prompt: Optional[str] = None


class CreateImageResponse(ResponseModel):
    created: int
    data: List[ImageObject]


__all__ = [
    "ImageModel",
    "ImageQuality",
    "ImageResponseFormat",
    "ImageSize",
    "ImageStyle",
    "CreateImageRequest",
    "ImageObject",
    "CreateImageResponse",
]
