import os
import logging
from datetime import datetime

from flask import Flask, request, jsonify, send_from_directory

import config
import eft_service
from utils.file_utils import sanitize_filename, stored_path
from utils.log_utils import configure_logging, read_log

logger = logging.getLogger("eft005")

# --- Flask initialization ---
app = Flask(__name__)


def _status_code(result):
    return 400 if result.get("status") == eft_service.STATUS_ERROR else 200


def _request_json_text():
    """Interchange JSON either as the raw body or as a 'file' upload."""
    if "file" in request.files:
        return request.files["file"].read().decode("utf-8")
    return request.get_data(as_text=True)


def _listing(path):
    entries = []
    if os.path.exists(path):
        for f in sorted(os.listdir(path)):
            fpath = os.path.join(path, f)
            if os.path.isfile(fpath):
                modified = datetime.fromtimestamp(os.path.getmtime(fpath), config.TIMEZONE)
                entries.append({"name": f, "modified": modified.strftime("%Y-%m-%d %H:%M:%S")})
    return entries


# ==============================
# API: Upload and parse
# ==============================
@app.route("/api/upload", methods=["POST"])
def upload_file():
    if "file" not in request.files:
        return jsonify({"error": "No file sent."}), 400
    file = request.files["file"]
    if file.filename == "":
        return jsonify({"error": "Empty file name."}), 400

    filename = sanitize_filename(file.filename)
    os.makedirs(config.INPUT_DIR, exist_ok=True)
    save_path = os.path.join(config.INPUT_DIR, filename)
    file.save(save_path)
    logger.info("📤 File received: %s", filename)

    result = eft_service.parse_file(save_path, reject_on_error=True)
    return jsonify({"message": f"File {filename} received and parsed.", "result": result}), _status_code(result)


# ==============================
# API: Parse a stored file
# ==============================
@app.route("/api/parse", methods=["POST"])
def parse_endpoint():
    data = request.get_json(silent=True) or {}
    filename = data.get("filename")
    mode = data.get("mode", "strict")
    if not filename:
        return jsonify({"error": "File name not given."}), 400
    if mode not in ("strict", "stream"):
        return jsonify({"error": f"Unknown mode {mode!r} (expected strict or stream)."}), 400

    path_in = stored_path(config.INPUT_DIR, filename)
    if not os.path.exists(path_in):
        return jsonify({"error": f"File {filename} not found."}), 404

    if mode == "stream":
        result = eft_service.scan_file(path_in)
    else:
        result = eft_service.parse_file(path_in)
    return jsonify(result), _status_code(result)


# ==============================
# API: Build from interchange JSON
# ==============================
@app.route("/api/build", methods=["POST"])
def build_endpoint():
    validate = request.args.get("validate", "false").lower() in ("1", "true", "yes")
    filename = request.args.get("filename")
    result = eft_service.build_file(_request_json_text(), validate=validate, filename=filename)
    result.pop("content", None)
    return jsonify(result), _status_code(result)


# ==============================
# API: Validate interchange JSON
# ==============================
@app.route("/api/validate", methods=["POST"])
def validate_endpoint():
    result = eft_service.validate_json(_request_json_text())
    return jsonify(result), _status_code(result)


# ==============================
# API: Status / operations log
# ==============================
@app.route("/api/status", methods=["GET"])
def get_status():
    return jsonify({"logs": read_log()})


# ==============================
# API: Input / output listing
# ==============================
@app.route("/api/files", methods=["GET"])
def list_files():
    return jsonify({"input": _listing(config.INPUT_DIR), "output": _listing(config.OUTPUT_DIR)})


# ==============================
# API: Download a built file
# ==============================
@app.route("/api/download/<filename>", methods=["GET"])
def download_file(filename):
    filename = sanitize_filename(filename)
    if not os.path.exists(stored_path(config.OUTPUT_DIR, filename)):
        logger.warning("⚠️ Download failed, file not found: %s", filename)
        return jsonify({"error": f"File '{filename}' not found in {config.OUTPUT_DIR}."}), 404
    return send_from_directory(config.OUTPUT_DIR, filename, as_attachment=True)


# ==============================
# Run
# ==============================
if __name__ == "__main__":
    configure_logging()
    config.ensure_dirs()
    app.run(host="0.0.0.0", port=config.PORT)
