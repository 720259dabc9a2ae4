import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from infrastructure.database import get_db
from domain.models.user_models import UserProfile, UserUpdate, ServiceCatalog
from application.use_cases.user_use_cases import UserUseCases
from application.utils.utils import SERVICE_CATALOG

router = APIRouter(prefix="/api", tags=["users"])

logger = logging.getLogger(__name__)

@router.get("/user/{user_id}", response_model=UserProfile)
def get_user(user_id: str, db: Session = Depends(get_db)):
    use_case = UserUseCases(db)
    return use_case.get_profile(user_id)

@router.put("/user/{user_id}", response_model=UserProfile)
def update_user(user_id: str, payload: UserUpdate, db: Session = Depends(get_db)):
    """
    Atualização parcial do perfil.
    Nome e CPF/CNPJ não podem ser alterados; campos omitidos mantêm o valor gravado.
    """
    use_case = UserUseCases(db)
    try:
        return use_case.update_profile(user_id, payload)
    except IntegrityError:
        # outro cadastro gravou o mesmo e-mail entre a checagem e o commit
        logger.warning("Conflito de e-mail ao atualizar usuario %s", user_id)
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail={"field": "email", "message": "Email ja cadastrado."},
        )

@router.get("/services", response_model=ServiceCatalog)
def list_services():
    return ServiceCatalog(services=list(SERVICE_CATALOG))
