""" All Application Constants declare here... """

# Python Packages
from decouple import config, Csv


# App Constants
APP_ENV                         =   config('APP_ENV', default = 'development')
APP_SECRET_KEY                  =   config('APP_SECRET_KEY', default = 'change-me')
LOG_LEVEL                       =   config('LOG_LEVEL', default = 'INFO')
CORS_ORIGINS                    =   config('CORS_ORIGINS', default = '*', cast = Csv())


# Swagger Constants
SWAGGER_APP_PROPS       =   {
                                "name": "IT Origin Chat",
                                "version": "1.0",
                                "description": "AI-assisted website chat: streams assistant \
                                replies to visitors, persists every turn, and gives \
                                operators a console to review and moderate conversations."
                            }


# Database Constants
DATABASE_URL                    =   config('DATABASE_URL', default = '')
DB_HOST                         =   config('DB_HOST', default = 'localhost')
DB_PORT                         =   config('DB_PORT', default = '5432')
DB_NAME                         =   config('DB_NAME', default = 'itorigin')
DB_USER                         =   config('DB_USER', default = 'postgres')
DB_PASSWORD                     =   config('DB_PASSWORD', default = 'postgres')


# Admin Constants
ADMIN_API_TOKEN                 =   config('ADMIN_API_TOKEN', default = '')


# AI Provider ("openai" | "anthropic")
AI_PROVIDER                     =   config('AI_PROVIDER', default = 'openai')


# OpenAI Constants
OPENAI_API_KEY		            =	config('OPENAI_API_KEY', default = '')
OPENAI_DEFAULT_MODEL            =   config('OPENAI_DEFAULT_MODEL', default = 'gpt-4o-mini')


# Anthropic Constants
ANTHROPIC_API_KEY               =   config('ANTHROPIC_API_KEY', default = '')
ANTHROPIC_DEFAULT_MODEL         =   config('ANTHROPIC_DEFAULT_MODEL', default = 'claude-3-5-haiku-latest')


# Shared LLM Constants (provider calls are never retried)
LLM_TIMEOUT_SECONDS             =   config('LLM_TIMEOUT_SECONDS', default = 60, cast = float)
LLM_MAX_RETRIES                 =   0
