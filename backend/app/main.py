from fastapi import FastAPI, Depends, Request
from fastapi.responses import JSONResponse, Response
from sqlalchemy.orm import Session

from app.core.auth import require_user
from app.core.config import settings
from app.core.db import Base, engine, get_db
from app.core.errors import ValidationError, PermissionDenied, NotFound
from app.core.logging_config import configure_logging
from app.schemas.promotion import PromotionInput, PromotionOut, ImageInput, IdResponse
from app.services.image_service import DatabaseImageStore, ImageAttachmentWorkflow
from app.services.permissions import UserPermissionChecker
from app.services.promotion_service import PromotionService
from app.services.promotion_store import PromotionStore

from fastapi.middleware.cors import CORSMiddleware

# Import models so Base.metadata knows them
import app.models  # noqa

configure_logging(settings.LOG_LEVEL)

app = FastAPI(title="Promotions Backend")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS", "DELETE"],
    allow_headers=["Content-Type", "Authorization", "X-User-Id"],
    max_age=600,
)


# Create tables (no migrations yet)
Base.metadata.create_all(bind=engine)


@app.exception_handler(ValidationError)
def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(status_code=400, content={"messages": exc.messages})


@app.exception_handler(PermissionDenied)
def permission_denied_handler(request: Request, exc: PermissionDenied):
    return JSONResponse(status_code=401, content={"error": "Unauthorized"})


@app.exception_handler(NotFound)
def not_found_handler(request: Request, exc: NotFound):
    return JSONResponse(status_code=404, content={"error": f"{exc.entity.capitalize()} not found"})


def get_promotion_service(db: Session = Depends(get_db)) -> PromotionService:
    return PromotionService(PromotionStore(db), UserPermissionChecker(db))


def get_image_workflow(db: Session = Depends(get_db)) -> ImageAttachmentWorkflow:
    return ImageAttachmentWorkflow(DatabaseImageStore(db))


@app.get("/")
def health():
    return {"status": "ok"}


@app.get("/v1/promotion", response_model=list[PromotionOut])
def list_promotions(
    user_id: str = Depends(require_user),
    service: PromotionService = Depends(get_promotion_service),
):
    return service.list()


@app.post("/v1/promotion", response_model=IdResponse)
def create_promotion(
    body: PromotionInput,
    user_id: str = Depends(require_user),
    service: PromotionService = Depends(get_promotion_service),
):
    return {"id": service.create(user_id, body)}


# picture upload; POST only, so it never shadows GET/DELETE /{promotion_id}
@app.post("/v1/promotion/picture", response_model=IdResponse)
def update_promotion_picture(
    body: ImageInput,
    user_id: str = Depends(require_user),
    workflow: ImageAttachmentWorkflow = Depends(get_image_workflow),
):
    return {"id": workflow.attach(body.model_dump())}


@app.get("/v1/promotion/{promotion_id}", response_model=PromotionOut)
def read_promotion(
    promotion_id: str,
    service: PromotionService = Depends(get_promotion_service),
):
    return service.read(promotion_id)


@app.delete("/v1/promotion/{promotion_id}")
def remove_promotion(
    promotion_id: str,
    user_id: str = Depends(require_user),
    service: PromotionService = Depends(get_promotion_service),
):
    service.invalidate(user_id, promotion_id)
    return Response(status_code=200)
