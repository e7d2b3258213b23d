from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Required from environment (.env / deployment secrets)
    database_url: str
    app_env: str = "development"  # development, staging, production

    # Bedrock LLM for resume analysis + candidate/job match scoring
    bedrock_llm_model_id: str = "mistral.ministral-3-8b-instruct"
    bedrock_llm_enabled: bool = True
    aws_region: str = "us-west-2"
    bedrock_llm_timeout_seconds: int = 30

    # CORS origins as comma-separated values
    # Example: "https://app.example.com,https://admin.example.com"
    cors_allow_origins: str = "http://localhost:5173"

    log_level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR

    # Resume uploads
    upload_dir: str = "uploads"
    max_resume_upload_mb: int = 10
    rate_limit_upload_per_min: int = 10

    # Dashboard
    recent_applications_limit: int = 10

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
