"""Example usage of the dfimage async API."""

import asyncio
import logging

from dfimage import DfimageError, check_engine_connectivity, dockerfile_from_image

# Set up logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


async def main():
    """Reconstruct the Dockerfile of a local image."""
    image_name = "nginx:alpine"

    try:
        logger.info("Checking engine connectivity...")
        if not await check_engine_connectivity():
            logger.error("Engine is not reachable")
            return

        lines = await dockerfile_from_image(image_name)
        logger.info(f"Reconstructed {len(lines)} instructions for {image_name}")
        for line in lines:
            print(line)

    except DfimageError as e:
        logger.error(f"dfimage error: {e}")


if __name__ == "__main__":
    asyncio.run(main())
