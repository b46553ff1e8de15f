# ecom/domain/errors.py
from fastapi import HTTPException, status

PROBLEM_BASE_URL = "https://www.jhipster.tech/problem"
DEFAULT_TYPE = f"{PROBLEM_BASE_URL}/problem-with-message"


class BadRequestAlertException(HTTPException):
    """
    400 tagged with the entity it concerns and an error key
    (idexists, idnull, idinvalid, idnotfound, ...).
    """

    def __init__(self, message: str, entity_name: str, error_key: str):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=message)
        self.entity_name = entity_name
        self.error_key = error_key

    def to_problem(self) -> dict:
        return {
            "type": DEFAULT_TYPE,
            "title": self.detail,
            "status": self.status_code,
            "message": f"error.{self.error_key}",
            "entityName": self.entity_name,
            "errorKey": self.error_key,
            "params": self.entity_name,
        }


class EntityNotFoundError(LookupError):
    """Raised by services when the entity an operation targets does not exist."""

    error_key = "idnotfound"

    def __init__(self, entity_name: str, entity_id):
        super().__init__(f"{entity_name} {entity_id} not found")
        self.entity_name = entity_name
        self.entity_id = entity_id

    def to_problem(self) -> dict:
        return {
            "type": DEFAULT_TYPE,
            "title": "Entity not found",
            "status": status.HTTP_404_NOT_FOUND,
            "detail": str(self),
            "message": f"error.{self.error_key}",
            "entityName": self.entity_name,
            "errorKey": self.error_key,
            "params": self.entity_name,
        }
