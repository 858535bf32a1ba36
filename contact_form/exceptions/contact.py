from fastapi import status

from .api_exception import APIException


class CouldNotSendMessageError(APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail = "Failed to send email"
    description = "The message could not be delivered to the operator."
