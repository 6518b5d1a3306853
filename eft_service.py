# =============================================================
# eft_service.py
# Parse / scan / build / validate EFT 005 files on disk
# v1.0 | EFT 005 Codec
# -------------------------------------------------------------
# Shared by app.py and cli.py. Every operation:
#   - returns a dict with at least file, mode, status, detail,
#   - appends one row to the CSV operations log,
#   - turns EftError / OSError into status "ERROR".
# =============================================================

import os
import logging

import config
from eft005 import EftError, EftFile, FileStreamer, ParseError, Reader, ScanParseError
from eft005.errors import FileValidationError
from mover import move_rejected_file
from utils.file_utils import output_name, output_path
from utils.log_utils import log_result
from utils.validation_utils import compare_totals, describe_mismatches

logger = logging.getLogger("eft005")

STATUS_OK = "OK"
STATUS_MISMATCH = "MISMATCH"
STATUS_PARTIAL = "PARTIAL"
STATUS_INVALID = "INVALID"
STATUS_ERROR = "ERROR"


# ======================================================
#  ⚙️  HELPERS
# ======================================================
def footer_total(eft_file):
    footer = eft_file.file_footer
    if footer is None:
        return 0
    return sum(v for k, v in footer.totals().items() if k.startswith("total_value_"))


def processed_total(eft_file):
    return sum(txn.get_amount() for txn in eft_file.transactions)


def _summary(eft_file):
    """Counts per record type, in output order."""
    return {
        "D": len(eft_file.get_all_debits()),
        "C": len(eft_file.get_all_credits()),
        "E": len(eft_file.get_all_credit_reversals()),
        "F": len(eft_file.get_all_debit_reversals()),
        "I": len(eft_file.get_all_credit_returns()),
        "J": len(eft_file.get_all_debit_returns()),
    }


def _failure(name, mode, error):
    log_result(name, mode, 0, 0, STATUS_ERROR, str(error))
    logger.error("❌ %s failed for %s: %s", mode, name, error)
    return {
        "file": name,
        "mode": mode,
        "status": STATUS_ERROR,
        "detail": str(error),
    }


def _decoded_result(name, mode, eft_file, skipped=None):
    total_footer = footer_total(eft_file)
    total_processed = processed_total(eft_file)
    mismatches = eft_file.footer_mismatches()
    skipped = skipped or []

    if skipped:
        status = STATUS_PARTIAL
        detail = f"{len(skipped)} segment(s) skipped"
    elif mismatches:
        status = STATUS_MISMATCH
        detail = describe_mismatches(mismatches)
    else:
        status = STATUS_OK
        detail = compare_totals(total_footer, total_processed)

    log_result(name, mode, total_footer, total_processed, status, detail)
    logger.info(
        "✅ %s (%s) status=%s transactions=%d footer_total=%d processed_total=%d",
        name, mode, status, len(eft_file.transactions), total_footer, total_processed,
    )
    return {
        "file": name,
        "mode": mode,
        "status": status,
        "detail": detail,
        "footer_total": total_footer,
        "processed_total": total_processed,
        "transaction_count": len(eft_file.transactions),
        "summary": _summary(eft_file),
        "footer_mismatches": {k: list(v) for k, v in mismatches.items()},
        "skipped": skipped,
        "eft_file": eft_file.model_dump(mode="json", by_alias=True),
    }


# ======================================================
#  📥  DECODE
# ======================================================
def parse_file(input_path, reject_on_error=False):
    """Strict decode: any error rejects the whole file."""
    name = os.path.basename(input_path)
    logger.info("📥 Parsing %s", name)
    try:
        with open(input_path, encoding="utf-8") as f:
            eft_file = Reader(f).read_file()
    except (EftError, OSError) as e:
        if reject_on_error and os.path.exists(input_path):
            move_rejected_file(input_path, config.ERROR_DIR)
        return _failure(name, "parse", e)
    return _decoded_result(name, "parse", eft_file)


def scan_file(input_path):
    """Tolerant decode: bad segments and lines are skipped and reported."""
    name = os.path.basename(input_path)
    logger.info("📥 Scanning %s", name)
    skipped = []
    try:
        with open(input_path, encoding="utf-8") as f:
            streamer = FileStreamer(f)
            header = streamer.get_header()
            try:
                footer = streamer.get_footer()
            except ParseError as e:
                logger.warning("⚠️ %s: %s", name, e)
                skipped.append({"kind": "footer", "error": str(e)})
                footer = None

            transactions = []
            for result in streamer:
                if result.error is None:
                    transactions.append(result.transaction)
                    continue
                entry = {"kind": "segment" if isinstance(result.error, ScanParseError) else "line",
                         "error": str(result.error)}
                if isinstance(result.error, ScanParseError):
                    entry.update(line=result.error.line_number, segment=result.error.segment_index)
                skipped.append(entry)
    except (EftError, OSError) as e:
        return _failure(name, "scan", e)

    eft_file = EftFile(file_header=header, transactions=transactions, file_footer=footer)
    return _decoded_result(name, "scan", eft_file, skipped)


# ======================================================
#  🚀  ENCODE
# ======================================================
def build_file(json_text, validate=False, output_dir=None, filename=None, source_name="<json>"):
    """
    Interchange JSON -> 005 file. The file is written to `output_dir`
    (default config.OUTPUT_DIR) unless output_dir is False.
    """
    try:
        eft_file = EftFile.from_json(json_text)
        if validate:
            eft_file.validate()
        content = eft_file.create()
        path = None
        if output_dir is not False:
            header = eft_file.file_header
            filename = filename or output_name(header.originator_id, header.file_creation_number)
            path = output_path(output_dir or config.OUTPUT_DIR, filename)
            with open(path, "w", encoding="utf-8", newline="") as f:
                f.write(content)
    except (EftError, OSError) as e:
        return _failure(source_name, "build", e)

    total = footer_total(eft_file)
    log_result(os.path.basename(path) if path else source_name, "build", total, processed_total(eft_file),
               STATUS_OK, f"{len(eft_file.transactions)} transaction(s)")
    logger.info("✅ Built %s with %d transaction(s)", path or source_name, len(eft_file.transactions))
    return {
        "file": os.path.basename(path) if path else source_name,
        "mode": "build",
        "status": STATUS_OK,
        "detail": f"{len(eft_file.transactions)} transaction(s)",
        "path": path,
        "footer_total": total,
        "line_count": eft_file.file_footer.record_count,
        "content": content,
    }


def validate_json(json_text, source_name="<json>"):
    """Runs file level validation and reports every violation."""
    try:
        eft_file = EftFile.from_json(json_text)
    except EftError as e:
        return _failure(source_name, "validate", e)

    try:
        eft_file.validate()
    except FileValidationError as e:
        violations = [
            {"record": err.record, "field": v.field, "rule": v.rule, "value": v.value}
            for err in e.errors
            for v in getattr(err, "violations", [])
        ]
        log_result(source_name, "validate", 0, 0, STATUS_INVALID, f"{len(violations)} violation(s)")
        logger.info("⚠️ %s: %d violation(s)", source_name, len(violations))
        return {
            "file": source_name,
            "mode": "validate",
            "status": STATUS_INVALID,
            "detail": str(e),
            "valid": False,
            "violations": violations,
        }

    log_result(source_name, "validate", 0, 0, STATUS_OK, "no violations")
    return {
        "file": source_name,
        "mode": "validate",
        "status": STATUS_OK,
        "detail": "no violations",
        "valid": True,
        "violations": [],
    }
