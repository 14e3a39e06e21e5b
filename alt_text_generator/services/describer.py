"""
Image Description Service

This module generates alt text for images with hosted AI models. The image
is downloaded first and forwarded to the model as a data URL.

Supported models:
- clip: rmokady/clip_prefix_caption on Replicate
- gpt: an OpenAI vision model through chat completions
"""

import base64
import logging
import time
from typing import Dict, List

import requests

REPLICATE_MODEL = "rmokady/clip_prefix_caption"

TERMINAL_STATUSES = ("succeeded", "failed", "canceled")

DEFAULT_MAX_IMAGE_BYTES = 10 * 1024 * 1024

CHUNK_SIZE = 8192

ALT_TEXT_PROMPT = (
    "Write a short alt text for this image, one sentence, suitable for a "
    "screen reader. Only return the alt text."
)


class DescriptionError(Exception):
    """Raised when a description cannot be produced for an image."""


def fetch_image_as_data_url(image_url: str, timeout: float = 15, user_agent: str = None,
                            max_bytes: int = DEFAULT_MAX_IMAGE_BYTES) -> str:
    """
    Download an image and convert it into a data URL.

    The body is streamed and the download is aborted as soon as it grows
    past max_bytes.

    Args:
        image_url: Address of the image
        timeout: Request timeout in seconds
        user_agent: Optional User-Agent header
        max_bytes: Largest accepted image size in bytes

    Returns:
        str: data:<mime>;base64,<payload>

    Raises:
        DescriptionError: If the download fails, the response is not an
        image or it is larger than max_bytes
    """
    headers = {"User-Agent": user_agent} if user_agent else {}
    try:
        response = requests.get(image_url, headers=headers, timeout=timeout, stream=True)
    except requests.RequestException as e:
        raise DescriptionError(f"Could not download image {image_url}: {e}") from e

    try:
        response.raise_for_status()

        content_type = response.headers.get("Content-Type", "").split(";")[0].strip()
        if not content_type.startswith("image/"):
            raise DescriptionError(f"URL does not point to an image: {image_url} ({content_type or 'no content type'})")

        declared = response.headers.get("Content-Length", "")
        if declared.isdigit() and int(declared) > max_bytes:
            raise DescriptionError(f"Image {image_url} is larger than {max_bytes} bytes")

        content = bytearray()
        for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
            content.extend(chunk)
            if len(content) > max_bytes:
                raise DescriptionError(f"Image {image_url} is larger than {max_bytes} bytes")
    except requests.RequestException as e:
        raise DescriptionError(f"Could not download image {image_url}: {e}") from e
    finally:
        response.close()

    encoded = base64.b64encode(bytes(content)).decode("ascii")
    return f"data:{content_type};base64,{encoded}"


class ImageDescriber:
    """Base class for describers; subclasses implement _generate()."""

    def __init__(self, client_manager, logger: logging.Logger, fetch_timeout: float = 15, user_agent: str = None,
                 max_image_bytes: int = DEFAULT_MAX_IMAGE_BYTES):
        self.clients = client_manager
        self.logger = logger
        self.fetch_timeout = fetch_timeout
        self.user_agent = user_agent
        self.max_image_bytes = max_image_bytes

    def describe_image(self, image_url: str) -> List[Dict[str, str]]:
        """
        Generate alt text for an image.

        Args:
            image_url: Address of the image

        Returns:
            List with one {"description", "imageUrl"} entry

        Raises:
            DescriptionError: If the image or the model call fails
        """
        data_url = fetch_image_as_data_url(
            image_url, self.fetch_timeout, self.user_agent, self.max_image_bytes
        )

        self.logger.info("Generating alt text...")
        try:
            description = self._generate(data_url)
        except DescriptionError:
            raise
        except Exception as e:
            raise DescriptionError(f"Error fetching description for {image_url}: {e}") from e

        self.logger.debug(f"Alt text generated for {image_url}")
        return [{"description": description, "imageUrl": image_url}]

    def _generate(self, data_url: str) -> str:
        raise NotImplementedError


class ReplicateImageDescriber(ImageDescriber):
    """Describes images with the CLIP prefix captioning model on Replicate."""

    def __init__(self, client_manager, logger, model_version, poll_interval=1, timeout=120, **kwargs):
        super().__init__(client_manager, logger, **kwargs)
        self.model_version = model_version
        self.poll_interval = poll_interval
        self.timeout = timeout

    def _generate(self, data_url: str) -> str:
        client = self.clients.replicate_client
        prediction = client.predictions.create(
            version=self.model_version,
            input={"image": data_url},
        )
        self.logger.debug(f"Created prediction {prediction.id} for {REPLICATE_MODEL}")

        self._wait_for_prediction(prediction)

        if prediction.status != "succeeded":
            raise DescriptionError(
                f"Prediction {prediction.id} {prediction.status}: {prediction.error}"
            )

        output = prediction.output
        if isinstance(output, list):
            output = "".join(str(part) for part in output)
        return str(output).strip()

    def _wait_for_prediction(self, prediction) -> None:
        """Poll the prediction at a fixed interval until it finishes."""
        deadline = time.monotonic() + self.timeout
        while prediction.status not in TERMINAL_STATUSES:
            if time.monotonic() >= deadline:
                self._cancel(prediction)
                raise DescriptionError(
                    f"Prediction {prediction.id} did not finish within {self.timeout}s"
                )
            time.sleep(self.poll_interval)
            prediction.reload()

    def _cancel(self, prediction) -> None:
        try:
            prediction.cancel()
        except Exception as e:
            self.logger.warning(f"Could not cancel prediction {prediction.id}: {e}")


class OpenAIImageDescriber(ImageDescriber):
    """Describes images with an OpenAI vision model."""

    def __init__(self, client_manager, logger, model="gpt-4o-mini", **kwargs):
        super().__init__(client_manager, logger, **kwargs)
        self.model = model

    def _generate(self, data_url: str) -> str:
        response = self.clients.openai_client.chat.completions.create(
            model=self.model,
            messages=[
                {
                    "role": "user",
                    "content": [
                        {"type": "text", "text": ALT_TEXT_PROMPT},
                        {"type": "image_url", "image_url": {"url": data_url}},
                    ],
                }
            ],
            temperature=0.2,
            max_tokens=100,
        )
        return response.choices[0].message.content.strip()
