import os
import logging
from flask import Flask, jsonify, request
from flask_cors import CORS
from dotenv import load_dotenv

from data_access import ensure_score_table, save_score, get_leaderboard
from domain.errors import InvalidInput, PersistenceUnavailable
from domain.scores import entry_from_row

load_dotenv()

app = Flask(__name__)
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO"),
    format="%(asctime)s [%(levelname)s] %(message)s",
)

# Allowed origins can be configured via CORS_ALLOWED_ORIGINS env var (comma-separated)
allowed_origins_env = os.getenv("CORS_ALLOWED_ORIGINS")
if allowed_origins_env:
    allowed_origins = [o.strip() for o in allowed_origins_env.split(",") if o.strip()]
else:
    # sensible defaults for local dev
    allowed_origins = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

CORS(app, resources={r"/api/*": {"origins": allowed_origins}})


@app.route("/api/health", methods=["GET"])
def health():
    return jsonify({"status": "ok"})


@app.route("/api/save-score", methods=["POST"])
def save_score_endpoint():
    """
    Store the final score of a finished game.

    Request body:
    - playerName: 2-20 characters
    - score: integer between 0 and 1000

    Returns 400 for invalid input and 500 when the database cannot be written.
    """
    payload = request.get_json(silent=True) or {}
    player_name = payload.get("playerName")
    score = payload.get("score")

    try:
        ensure_score_table()
        logging.info(f"Attempting to save score: {player_name} -> {score}")
        save_score(player_name, score)
        return jsonify({
            "success": True,
            "message": "Score saved successfully"
        })

    except InvalidInput as error:
        logging.warning(f"Rejected score submission: {error}")
        return jsonify({"error": str(error)}), 400

    except PersistenceUnavailable as error:
        logging.error(f"Error saving score: {error}")
        return jsonify({
            "error": "Failed to save score",
            "details": str(error)
        }), 500

    except Exception as error:
        logging.error(f"Unexpected error saving score: {error}")
        return jsonify({
            "error": "Failed to save score",
            "details": str(error)
        }), 500


@app.route("/api/save-score", methods=["GET"])
def get_leaderboard_endpoint():
    """
    Get the top 10 scores, highest first.

    Returns a list of {player_name, score, created_at} objects.
    """
    try:
        ensure_score_table()
        rows = get_leaderboard()
        return jsonify([entry_from_row(row).to_dict() for row in rows])

    except Exception as error:
        logging.error(f"Error fetching leaderboard: {error}")
        return jsonify({"error": "Failed to fetch leaderboard"}), 500


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=bool(os.getenv("FLASK_DEBUG")))
