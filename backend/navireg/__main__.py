"""Run the development server: ``python -m navireg``."""

from __future__ import annotations

from navireg import create_app


def main() -> None:
    app = create_app()
    app.run(host="0.0.0.0", port=app.config["PORT"], threaded=True)


if __name__ == "__main__":
    main()
