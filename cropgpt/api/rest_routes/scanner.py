from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status

from cropgpt.core.genai_client import GenAIProvider, get_genai_provider
from cropgpt.models.crop_diagnosis import CropDiagnosis
from cropgpt.services.query_service import analyze_crop_image

router = APIRouter(prefix="/scanner", tags=["Scanner"])


@router.post("/analyze", response_model=CropDiagnosis, response_model_exclude_none=True)
async def analyze_crop_photo(
    file: UploadFile = File(...),
    provider: GenAIProvider = Depends(get_genai_provider),
):
    """
    Analyzes an uploaded crop photo for health issues, sent as multipart/form-data.
    """
    mime_type = file.content_type or ""
    if not mime_type.startswith("image/"):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Only image uploads can be analyzed.",
        )

    image = await file.read()
    if not image:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Uploaded image is empty.",
        )

    diagnosis = await analyze_crop_image(image, mime_type=mime_type, provider=provider)
    if diagnosis is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Could not analyze the image. Please try again.",
        )
    return diagnosis
