# emailverify_connectors/emailverify/constants.py

# --- Endpoints de l'API ---
ENDPOINT_VALIDATE = "/api/v1/validate"
ENDPOINT_VALIDATE_BATCH = "/api/v1/validate-batch"
ENDPOINT_EMAIL_FINDER = "/api/v1/finder"
ENDPOINT_ACCOUNT_BALANCE = "/api/v1/check-account-balance"
ENDPOINT_BATCH_RESULT = "/api/v1/get-result-bulk-verification-task"

# --- Statuts de validation ---
STATUS_VALID = "valid"
STATUS_INVALID = "invalid"
STATUS_CATCH_ALL = "catch_all"
STATUS_DO_NOT_MAIL = "do_not_mail"
STATUS_UNKNOWN = "unknown"
STATUS_ROLE_BASED = "role_based"    # info@, support@, ...
STATUS_SKIPPED = "skipped"

# --- Sous-statuts (précisent le statut principal) ---
SUBSTATUS_PERMITTED = "permitted"
SUBSTATUS_FAILED_SYNTAX_CHECK = "failed_syntax_check"
SUBSTATUS_MAILBOX_QUOTA_EXCEEDED = "mailbox_quota_exceeded"
SUBSTATUS_MAILBOX_NOT_FOUND = "mailbox_not_found"
SUBSTATUS_NO_DNS_ENTRIES = "no_dns_entries"
SUBSTATUS_DISPOSABLE = "disposable"
SUBSTATUS_NONE = "none"
SUBSTATUS_OPT_OUT = "opt_out"
SUBSTATUS_BLOCKED_DOMAIN = "blocked_domain"

# --- Email finder ---
FINDER_STATUS_FOUND = "found"
FINDER_STATUS_NOT_FOUND = "not_found"
FINDER_EMAIL_NOT_FOUND = "null"     # valeur sentinelle renvoyée par le service
