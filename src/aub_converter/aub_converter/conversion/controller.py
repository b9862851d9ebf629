from __future__ import annotations

from flask import Flask, flash, jsonify, redirect, render_template, request, url_for
from werkzeug.exceptions import RequestEntityTooLarge

from ..container import Container
from ..core.exceptions import UnreadableFileError, ValidationError


def register(app: Flask, container: Container) -> None:
    service = container.conversion_service

    def _render_index(result=None):
        return render_template(
            "converter/index.html",
            result=result,
            accept=",".join(sorted(service.allowed_extensions)),
            direction_mode=service.direction_mode.value,
            active_page="converter",
        )

    @app.route("/", methods=["GET"], endpoint="index")
    def index():
        return _render_index()

    @app.route("/convert", methods=["POST"], endpoint="convert")
    def convert():
        upload = request.files.get("file")
        filename = upload.filename if upload else None

        try:
            result = service.convert_upload(filename, upload.read() if upload else b"")
        except UnreadableFileError as e:
            flash(str(e), "danger")
            return redirect(url_for("index"))
        except ValidationError as e:
            flash(str(e), "warning")
            return redirect(url_for("index"))
        except Exception:
            app.logger.exception("Conversion failed for %s", filename)
            flash("Error processing file. Please try again.", "danger")
            return redirect(url_for("index"))

        if result.is_empty:
            flash("No valid lines found in the file.", "warning")
        elif result.skipped_count:
            flash(f"Converted {result.records} lines, skipped {result.skipped_count} malformed lines.", "info")
        else:
            flash(f"Converted {result.records} lines.", "success")
        return _render_index(result)

    @app.route("/download", methods=["POST"], endpoint="download")
    def download():
        # Converted text is posted back, larger than the upload once url-encoded
        request.max_content_length = app.config["DOWNLOAD_MAX_FORM_SIZE"]
        request.max_form_memory_size = app.config["DOWNLOAD_MAX_FORM_SIZE"]

        try:
            file = service.build_download(request.form.get("converted", ""))
        except ValidationError as e:
            flash(str(e), "warning")
            return redirect(url_for("index"))

        return app.response_class(
            file.content,
            mimetype=file.mimetype,
            headers={"Content-Disposition": f"attachment; filename={file.filename}"},
        )

    @app.route("/api/convert", methods=["POST"], endpoint="api_convert")
    def api_convert():
        """JSON conversion: multipart ``file`` or ``{"content": "..."}``."""
        try:
            upload = request.files.get("file")
            if upload:
                result = service.convert_upload(upload.filename, upload.read())
            else:
                payload = request.get_json(silent=True) or {}
                content = payload.get("content")
                if not isinstance(content, str):
                    raise ValidationError("Please select a file first")
                result = service.convert(content)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            app.logger.exception("API conversion failed")
            return jsonify({"success": False, "message": "Error processing file"}), 500

        return jsonify({"success": True, **result.to_dict()}), 200

    @app.errorhandler(RequestEntityTooLarge)
    def upload_too_large(_e):
        limit_mb = (app.config.get("MAX_CONTENT_LENGTH") or 0) // (1024 * 1024)
        message = f"File is too large (limit {limit_mb} MB)."
        if request.endpoint == "download":
            message = "Converted data is too large to download. Please split the file."
        if request.path.startswith("/api/"):
            return jsonify({"success": False, "message": message}), 413
        flash(message, "danger")
        return redirect(url_for("index"))
