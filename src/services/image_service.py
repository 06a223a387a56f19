"""
Background image generation.

Renders the ticket background through a Bedrock image model. A missing
background must never block ticket creation, so every failure is folded into
an ImageResult instead of being raised.
"""

from __future__ import annotations

import json
import time
from typing import Any, Dict, Optional

from config.settings import Settings
from models.results import ImageResult, ImageStatus
from services.prompts import COMPOSITION_SUFFIX, IMAGE_PROMPT_PREFIX
from utils.logging_config import get_logger

logger = get_logger(__name__)

# Nova Canvas rejects prompts longer than this.
MAX_PROMPT_CHARS = 1024


class ImageGenerator:
    """Render scene prompts into data URIs."""

    def __init__(self, client: Optional[Any], settings: Settings):
        self.client = client
        self.settings = settings

    def generate(self, prompt: str) -> str:
        """Return a data URI, or "" when no image is available."""
        return self.render(prompt).data_uri

    def render(self, prompt: Optional[str]) -> ImageResult:
        """Render a background and report how it went."""
        scene = (prompt or "").strip()
        if not scene:
            return ImageResult(status=ImageStatus.NOT_ATTEMPTED, note="Empty prompt")
        if self.client is None:
            logger.warning("Skipping image generation: Bedrock client not configured")
            return ImageResult(status=ImageStatus.FAILED, note="Image generation not configured")

        start = time.perf_counter()
        try:
            response = self.client.invoke_model(
                modelId=self.settings.image_model_id,
                contentType="application/json",
                accept="application/json",
                body=json.dumps(self.build_request(scene)),
            )
            payload = json.loads(response["body"].read())
            return self.parse_response(payload)
        except Exception as exc:
            logger.error("Error generating ticket image", extra={"error": str(exc)})
            return ImageResult(status=ImageStatus.FAILED, note=str(exc))
        finally:
            logger.info(
                "Image generation latency captured",
                extra={"duration_ms": int((time.perf_counter() - start) * 1000)},
            )

    def build_request(self, scene: str) -> Dict[str, Any]:
        width, height = self.settings.image_dimensions
        return {
            "taskType": "TEXT_IMAGE",
            "textToImageParams": {"text": compose_prompt(scene)},
            "imageGenerationConfig": {
                "numberOfImages": 1,
                "width": width,
                "height": height,
                "quality": "standard",
            },
        }

    def parse_response(self, payload: Dict[str, Any]) -> ImageResult:
        """First image wins; refusal text is logged, never raised."""
        note = payload.get("error") or payload.get("text")
        if note:
            logger.warning("Image generation returned text instead of image", extra={"note": note})

        for image in payload.get("images") or []:
            if image:
                return ImageResult(
                    status=ImageStatus.SUCCEEDED,
                    data_uri=f"data:image/png;base64,{image}",
                )

        return ImageResult(status=ImageStatus.DECLINED, note=note or "No image data found in response")


def compose_prompt(scene: str) -> str:
    """Wrap a scene description with the fixed framing directives."""
    scene = scene.strip().rstrip(".")
    fixed_chars = len(IMAGE_PROMPT_PREFIX) + len(COMPOSITION_SUFFIX) + 4
    budget = MAX_PROMPT_CHARS - fixed_chars
    if len(scene) > budget:
        scene = scene[:budget].rstrip()
    return f"{IMAGE_PROMPT_PREFIX} {scene}. {COMPOSITION_SUFFIX}"
