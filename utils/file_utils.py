import os
import re

INVALID_FN_CHARS = re.compile(r'[^A-Za-z0-9._-]')


def sanitize_filename(name):
    """Basename only, anything outside [A-Za-z0-9._-] collapsed to '_'."""
    s = INVALID_FN_CHARS.sub('_', os.path.basename(name.strip()))
    return re.sub(r'_+', '_', s)


def stored_path(base_dir, filename):
    """Path of an uploaded or built file inside one of the configured directories."""
    return os.path.join(base_dir, sanitize_filename(filename))


def output_path(output_dir, filename):
    os.makedirs(output_dir, exist_ok=True)
    return stored_path(output_dir, filename)


def output_name(originator_id, file_creation_number, suffix=".txt"):
    """EFT005_<originator>_<creation number>.txt"""
    return sanitize_filename(f"EFT005_{originator_id}_{int(file_creation_number):04d}{suffix}")
