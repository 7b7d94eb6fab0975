from __future__ import annotations


# Bundled dataset, relative to the `verbi` package
DATASET_PACKAGE = "verbi"
DATASET_RESOURCE = "assets/verbs.json"
DATASET_NAME = "verbs.json"


# Environment overrides
DATASET_ENV = "VERBI_DATASET"
LOG_LEVEL_ENV = "VERBI_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


# Output labels (Italian, reproduced verbatim)
LABEL_VERB = "Verbo (Italiano):"
LABEL_GERMAN = "Coniugazioni Tedesche:"
LABEL_ITALIAN = "Coniugazioni Italiane:"
SEPARATOR = "-" * 20


# Summary messages
MSG_NOT_FOUND = "Verbo '{query}' non trovato nel file {name}."
MSG_EMPTY_DATASET = "Nessun verbo trovato nel file {name}."
MSG_FULL_LISTING = "Elenco di tutti i verbi nel file {name} mostrato."
MSG_FILTER_HINT = "Per visualizzare un verbo specifico, usa il flag: -verb <nome_verbo> oppure -v <nome_verbo>"
MSG_FOUND = "Informazioni per il verbo '{query}' mostrate."


# Error diagnostics
ERROR_PREFIX = "Errore:"
MSG_READ_ERROR = "errore nella lettura del file {source}: {cause}"
MSG_PARSE_ERROR = "errore nell'analisi JSON: {cause}"
