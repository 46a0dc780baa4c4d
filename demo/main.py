#!/usr/bin/env -S uv run --script
import logging
import os

from vec3 import X_AXIS, Y_AXIS, Vector3

logger = logging.getLogger("vec3.demo")


def configure_logging():
    level = os.getenv("VEC3_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s [%(name)s] %(message)s")


def main():
    configure_logging()
    v1 = Vector3(1.0, 2.0, 3.0)
    v2 = Vector3(3.0, 1.0, 2.0)

    # basic operations
    logger.info("Sum: %s", v1 + v2)
    logger.info("Difference: %s", v1 - v2)
    logger.info("Dot product: %s", v1.dot(v2))
    logger.info("Cross product: %s", v1.cross(v2))

    # other methods
    logger.info("Lerp 50%%: %s", v1.lerp(v2, 0.5))
    logger.info("Angle: %s (%.2f degrees)", v1.angle(v2), v1.angle_deg(v2))
    logger.info("Are they close enough?: %s", v1.fuzzy_equal(v2, 0.001))
    logger.info("X cross Y: %s", X_AXIS.cross(Y_AXIS))

    v1.normalize_in_place()
    v2.normalize_in_place()
    logger.info("v1 normalized: %s", v1)
    logger.info("v2 normalized: %s", v2)

    # set VEC3_LOG_LEVEL=DEBUG to see the degenerate cases reported
    logger.info("Zero vector normalized: %s", Vector3(0, 0, 0).normalize())


if __name__ == "__main__":
    main()
