class ApiKeyMissingError(Exception):
    def __init__(
        self,
        message="Authentication required. Set the POSTMAN_API_KEY environment variable to a valid Postman API key.",
    ):
        self.message = message
        super().__init__(self.message)
