from app.config import get_config
from app.services.resume_service import ResumeService
from app.services.gemini_service import GeminiService
from app.services.career_service import CareerService

config = get_config()

# Initialize services
resume_service = ResumeService(config)
gemini_service = GeminiService(config)
career_service = CareerService(gemini_service)
