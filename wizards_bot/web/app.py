import hmac
import logging
from flask import Flask, Response, jsonify, render_template, request

from wizards_bot.config import Config, load_config, require
from wizards_bot.mirrors.rewrite import rewrite_urls
from wizards_bot.utils.text_format import is_blank

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
EMPTY_TEXT_REPLY = "You need to supply a URL"


def _error(message: str, status: int) -> tuple[Response, int]:
    return jsonify({"error": message}), status


def _not_found() -> tuple[str, int]:
    return render_template("not_found.html"), 404


def verify_token(authorization: str, token: str) -> bool:
    expected = f"Token {token}"
    return hmac.compare_digest(authorization.encode("utf-8"), expected.encode("utf-8"))


def create_app(config: Config) -> Flask:
    token = require(config.mm_slash_token, "MM_SLASH_TOKEN")
    app = Flask(__name__)

    @app.route("/")
    def index():
        return render_template("home.html", revision=config.revision)

    @app.route("/style.css")
    def stylesheet():
        return app.send_static_file("style.css")

    @app.route("/nit", methods=["GET", "POST"])
    def nit():
        if request.method != "POST":
            return _not_found()

        if "Content-Type" not in request.headers:
            logger.warning("Rejected /nit: no Content-Type header")
            return _error("Content-Type header not found", 400)
        authorization = request.headers.get("Authorization")
        if authorization is None:
            logger.warning("Rejected /nit: no Authorization header")
            return _error("Authorization header not found", 400)

        if request.mimetype != FORM_CONTENT_TYPE:
            logger.warning(f"Rejected /nit: unexpected content type {request.mimetype!r}")
            return _error("Bad request", 400)

        if not verify_token(authorization, token):
            logger.warning(f"Rejected /nit from {request.remote_addr}: bad token")
            return _error("Not authorised", 401)

        text = request.form.get("text")
        if is_blank(text):
            return jsonify({"response_type": "ephemeral", "text": EMPTY_TEXT_REPLY})

        rewritten = rewrite_urls(text)
        logger.info(f"/nit: rewrote {len(text)} -> {len(rewritten)} chars")
        return jsonify({"response_type": "in_channel", "text": rewritten})

    @app.errorhandler(404)
    def page_not_found(error):
        return _not_found()

    return app


def main():
    config = load_config()
    logging.basicConfig(
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        level=getattr(logging, config.log_level, logging.INFO),
    )

    app = create_app(config)
    logger.info(f"http server running on http://{config.address}:{config.port}")
    app.run(host=config.address, port=config.port, debug=False)


if __name__ == "__main__":
    main()
