"""Runtime configuration resolved once at startup."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from imgbb_batch.exceptions import ConfigurationError

API_KEY_ENV_VAR = "IMGBB_API_KEY"
DEFAULT_SOURCE_DIR = Path("./images")
DEFAULT_OUTPUT_DIR = Path(".")
DEFAULT_TIMEOUT = 60.0

# ImgBB accepts auto-deletion between one minute and 180 days
MIN_EXPIRATION = 60
MAX_EXPIRATION = 15552000


@dataclass(frozen=True)
class UploaderConfig:
    """Settings shared by the scanner, uploader and reporter."""

    api_key: str
    source_dir: Path
    output_dir: Path = DEFAULT_OUTPUT_DIR
    timeout: float = DEFAULT_TIMEOUT
    expiration: int | None = None
    verbose: bool = False


def load_config(
    source_dir: Path | None = None,
    output_dir: Path | None = None,
    timeout: float | None = None,
    expiration: int | None = None,
    verbose: bool = False,
) -> UploaderConfig:
    """
    Build the configuration from command-line values and the environment.

    The API key is read from ``IMGBB_API_KEY``, falling back to a ``.env``
    file in the working directory.

    Args:
        source_dir: Folder to scan for images (default: ./images)
        output_dir: Folder that receives the results file
        timeout: Per-upload HTTP timeout in seconds
        expiration: Optional auto-delete delay in seconds
        verbose: Show tracebacks on fatal errors

    Returns:
        UploaderConfig: The resolved, read-only configuration

    Raises:
        ConfigurationError: If the API key is missing or an option is invalid
    """
    _ = load_dotenv()

    api_key = (os.getenv(API_KEY_ENV_VAR) or "").strip()
    if not api_key:
        raise ConfigurationError(
            f"{API_KEY_ENV_VAR} environment variable is required. "
            + f"Set it with: export {API_KEY_ENV_VAR}=your_api_key_here "
            + f"(or add {API_KEY_ENV_VAR}=your_api_key_here to a .env file)"
        )

    if timeout is not None and timeout <= 0:
        raise ConfigurationError(f"Timeout must be positive, got {timeout}")

    if expiration is not None and not MIN_EXPIRATION <= expiration <= MAX_EXPIRATION:
        raise ConfigurationError(
            f"Expiration must be between {MIN_EXPIRATION} and {MAX_EXPIRATION} seconds, "
            + f"got {expiration}"
        )

    return UploaderConfig(
        api_key=api_key,
        source_dir=(source_dir or DEFAULT_SOURCE_DIR).resolve(),
        output_dir=output_dir or DEFAULT_OUTPUT_DIR,
        timeout=timeout or DEFAULT_TIMEOUT,
        expiration=expiration,
        verbose=verbose,
    )
