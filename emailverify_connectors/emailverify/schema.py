from pydantic import BaseModel, Field, ConfigDict
from typing import Optional, List

from emailverify_connectors.emailverify.constants import STATUS_VALID, FINDER_STATUS_FOUND


class ResponseModel(BaseModel):
    """
    Base des réponses du service: immuables, champs inconnus ignorés,
    champs absents remplacés par leur valeur par défaut.
    """
    model_config = ConfigDict(frozen=True, extra="ignore")


# --- Validation unitaire ---

class ValidateResponse(ResponseModel):
    """Réponse de GET /api/v1/validate"""
    email: str          = Field("", description="Adresse validée")
    status: str         = Field("", description="Statut (valid, invalid, catch_all, ...)")
    sub_status: str     = Field("", description="Sous-statut (permitted, mailbox_not_found, ...)")

    def is_valid(self) -> bool:
        return self.status == STATUS_VALID


# --- Validation par lot ---

class EmailAddress(BaseModel):
    """Une adresse à valider dans un lot"""
    address: str


class BatchValidateRequest(BaseModel):
    """Corps JSON de POST /api/v1/validate-batch"""
    title: str
    key: str
    email_batch: List[EmailAddress]


class BatchValidateResponse(ResponseModel):
    """Réponse à la soumission d'un lot"""
    status: str                     = Field("", description="Statut de la soumission")
    task_id: int                    = Field(0, description="Identifiant de la tâche côté serveur")
    count_submitted: int            = 0
    count_duplicates_removed: int   = 0
    count_rejected_emails: int      = 0
    count_processing: int           = 0


class EmailBatchResult(ResponseModel):
    """Résultat pour une adresse d'un lot"""
    address: str    = ""
    status: str     = ""
    sub_status: str = ""

    def is_valid(self) -> bool:
        return self.status == STATUS_VALID


class BatchValidateResultsWrapper(ResponseModel):
    email_batch: List[EmailBatchResult] = Field(default_factory=list)


class BatchResultResponse(ResponseModel):
    """Réponse de GET /api/v1/get-result-bulk-verification-task"""
    count_checked: int                      = 0
    count_total: int                        = 0
    task_id: int                            = 0
    name: str                               = ""
    status: str                             = ""
    progress_percentage: float              = Field(0.0, description="Avancement de la tâche (%)")
    results: BatchValidateResultsWrapper    = Field(default_factory=BatchValidateResultsWrapper)

    @property
    def email_batch(self) -> List[EmailBatchResult]:
        """Résultats par adresse, dans l'ordre renvoyé par le service."""
        return self.results.email_batch


# --- Email finder ---

class FindEmailResponse(ResponseModel):
    """Réponse de GET /api/v1/finder ; email vaut "null" si rien n'est trouvé."""
    email: str  = ""
    status: str = Field("", description="found ou not_found")

    def is_found(self) -> bool:
        return self.status == FINDER_STATUS_FOUND


# --- Crédits du compte ---

class AccountBalanceResponse(ResponseModel):
    """
    Réponse de GET /api/v1/check-account-balance.
    Les champs optionnels dépendent du type de compte (absents pour les comptes appsumo):
    None = absent, 0 = explicitement zéro.
    """
    api_status: str                         = ""
    daily_credits_limit: int                = 0
    remaining_credits: Optional[int]        = None
    referral_credits: Optional[int]         = None
    remaining_daily_credits: Optional[int]  = None
    bonus_credits: Optional[int]            = None
