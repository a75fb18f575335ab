""" OpenAI Client Configuration... """

# Python Packages
from openai import OpenAI

# Constants
from ...base import constants





class OpenAIClient:
    """ Singleton OpenAI client for the application... """

    _instance = None
    _client = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(OpenAIClient, cls).__new__(cls)
            # No SDK retries: a failed reply ends the stream with an error frame
            cls._client = OpenAI(
                api_key = constants.OPENAI_API_KEY,
                timeout = constants.LLM_TIMEOUT_SECONDS,
                max_retries = constants.LLM_MAX_RETRIES
            )
        return cls._instance



    def get_client(self) -> OpenAI:
        """ Get the OpenAI client instance... """

        if self._client is None:
            raise Exception("OpenAI client not initialized. Set OPENAI_API_KEY environment variable.")

        return self._client
