from legal_analyzer.clients.openai_clients import prompt_deployment_name
from legal_analyzer.services.prompt_service import PromptService


prompt_service = PromptService(prompt_deployment_name)
