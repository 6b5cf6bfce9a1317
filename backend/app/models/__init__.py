from app.models.user import User
from app.models.image import Image
from app.models.promotion import Promotion, PromotionStatus

__all__ = ["User", "Image", "Promotion", "PromotionStatus"]
