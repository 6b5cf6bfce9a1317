from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class PromotionInput(BaseModel):
    # Loose on purpose: required/non-empty rules are reported by the
    # service as a ValidationError, not as a 422 from the request parser.
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    redirect_link: Optional[str] = Field(None, alias="redirectLink")
    image_id: Optional[str] = Field(None, alias="imageId")
    enabled: Optional[bool] = None


class PromotionOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: str
    title: str
    description: str
    redirect_link: str = Field(
        validation_alias=AliasChoices("redirect_link", "redirectLink"),
        serialization_alias="redirectLink",
    )
    image_id: str = Field(
        validation_alias=AliasChoices("image_id", "imageId"),
        serialization_alias="imageId",
    )


class ImageInput(BaseModel):
    image: Optional[str] = None


class IdResponse(BaseModel):
    id: str
