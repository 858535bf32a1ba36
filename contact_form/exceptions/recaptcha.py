from fastapi import status

from .api_exception import APIException


class RecaptchaError(APIException):
    status_code = status.HTTP_403_FORBIDDEN
    detail = "reCAPTCHA failed. Please try again."
    description = "The reCAPTCHA check did not pass."


class MissingRecaptchaTokenError(RecaptchaError):
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Missing reCAPTCHA token. Please try again."
    description = "No reCAPTCHA token was submitted with the form."


class RecaptchaVerificationError(RecaptchaError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail = "Error verifying reCAPTCHA. Please try again."
    description = "The reCAPTCHA verification service could not be reached or returned an invalid response."


class RecaptchaRejectedError(RecaptchaError):
    status_code = status.HTTP_403_FORBIDDEN
    detail = "reCAPTCHA failed. Please try again."
    description = "The reCAPTCHA response was unsuccessful, scored too low or was issued for another action."
