# trashcam/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path

class Settings(BaseSettings):
    MONGODB_URI: str = "mongodb://localhost:27017"
    DATABASE_NAME: str = "trashcam_db"
    UPLOAD_DIR: str = "uploads"
    UPLOAD_URL_PREFIX: str = "/uploads"
    MAX_UPLOAD_SIZE_MB: int = 20
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"

    # classifier (hosted Teachable Machine style model)
    MODEL_URL: str = "https://teachablemachine.withgoogle.com/models/rJapjDmoQ/"
    CLASSIFIER_PREDICT_URL: str = "http://localhost:8501/predict"
    CLASSIFIER_TIMEOUT: float = 30.0
    TARGET_LABEL: str = "Correct Tras..."
    CONFIDENCE_THRESHOLD: float = 0.40

    # client side
    BACKEND_URL: str = "http://localhost:3000"
    CAMERA_INDEX: int = 0

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

settings = Settings()
Path(settings.UPLOAD_DIR).mkdir(parents=True, exist_ok=True)
