import os
import shutil
import logging

logger = logging.getLogger("eft005")


def move_rejected_file(source_path, target_dir):
    """Moves a file that failed to decode out of the input directory."""
    os.makedirs(target_dir, exist_ok=True)
    dest_path = os.path.join(target_dir, os.path.basename(source_path))
    shutil.move(source_path, dest_path)
    logger.info("📦 Rejected file moved to %s", dest_path)
    return dest_path
