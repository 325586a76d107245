"""
Scholarship Evaluation Application Package.

Modules:
- config: Environment variables and settings
- dependencies: Shared dependencies (settings, Gemini gateway)
- errors: Error taxonomy mapped to HTTP responses
- prompts: Centralized LLM prompt and response schema
- models: Pydantic request/response schemas
- services: Business logic (gateway, assessment parsing, eligibility, analysis)
- routers: API endpoints
"""
