# trashcam/client/__main__.py
import argparse
import logging
import sys

import httpx

from ..config import settings
from ..utils.scoring import format_predictions
from .api import BackendClient
from .camera import CameraError, Webcam, list_cameras, load_photo
from .inference import ClassifierError, RemoteClassifier
from .session import GameSession, SessionState

logger = logging.getLogger("trashcam.client")


def _read_frame(args) -> bytes:
    if args.photo:
        return load_photo(args.photo)
    with Webcam(args.camera) as cam:
        return cam.capture()


def cmd_play(args, backend: BackendClient) -> int:
    try:
        classifier = RemoteClassifier.from_base_url(args.model_url)
        print("Model loaded successfully!")
    except ClassifierError as e:
        print(e)
        return 1

    session = GameSession(backend=backend)
    try:
        session.refresh()
    except httpx.HTTPError as e:
        logger.warning("could not fetch leaderboard: %s", e)

    try:
        frame = _read_frame(args)
        predictions = classifier.predict(frame)
    except (CameraError, ClassifierError) as e:
        print(e)
        return 1
    finally:
        classifier.close()

    for line in format_predictions(predictions):
        print(line)
    verdict = session.evaluate(predictions)
    print(verdict.message)

    if session.state is SessionState.AWAITING_NAME:
        name = input("Enter your name for the leaderboard: ")
        try:
            lines = session.submit_name(name)
        except httpx.HTTPError as e:
            logger.error("Error updating leaderboard: %s", e)
            print("Failed to update leaderboard.")
            return 1
        for line in lines:
            print(line)
    return 0 if verdict.passed else 2


def cmd_upload(args, backend: BackendClient) -> int:
    try:
        body = backend.upload_image(args.name, args.file)
    except httpx.HTTPError as e:
        logger.error("Error uploading image: %s", e)
        print("Failed to upload image")
        return 1
    if "error" in body:
        print(body["error"])
        return 1
    print(f"{body['message']}: {body['filePath']}")
    return 0


def cmd_leaderboard(args, backend: BackendClient) -> int:
    session = GameSession(backend=backend)
    try:
        session.refresh()
    except httpx.HTTPError as e:
        logger.error("Error fetching leaderboard: %s", e)
        print("Failed to fetch leaderboard")
        return 1
    for line in session.render():
        print(line)
    return 0


def cmd_cameras(args, backend: BackendClient) -> int:
    cams = list_cameras()
    if not cams:
        print("No cameras found.")
        return 1
    for idx in cams:
        print(f"Camera {idx + 1} (index {idx})")
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Trash sorting photo game")
    parser.add_argument('--backend', default=settings.BACKEND_URL, help='Backend base URL')
    parser.add_argument('--debug', '-d', action='store_true', help='Enable debug logging')
    sub = parser.add_subparsers(dest='command', required=True)

    play = sub.add_parser('play', help='Classify a photo and score it')
    source = play.add_mutually_exclusive_group()
    source.add_argument('--photo', '-p', help='Photo file to classify')
    source.add_argument('--camera', '-c', type=int, default=settings.CAMERA_INDEX,
                        help='Webcam index to capture from')
    play.add_argument('--model-url', default=settings.MODEL_URL, help='Hosted model base URL')
    play.set_defaults(func=cmd_play)

    upload = sub.add_parser('upload', help='Upload a photo to the backend')
    upload.add_argument('name', help='Uploader name (needs lower, upper and special character)')
    upload.add_argument('file', help='Image file')
    upload.set_defaults(func=cmd_upload)

    board = sub.add_parser('leaderboard', help='Show the server leaderboard')
    board.set_defaults(func=cmd_leaderboard)

    cams = sub.add_parser('cameras', help='List available webcams')
    cams.set_defaults(func=cmd_cameras)

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.debug else settings.LOG_LEVEL)

    backend = BackendClient(args.backend)
    try:
        return args.func(args, backend)
    finally:
        backend.close()


if __name__ == "__main__":
    sys.exit(main())
