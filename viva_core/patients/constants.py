# viva_core/patients/constants.py
from __future__ import annotations

import re

from django.db import models


class DocumentType(models.TextChoices):
    CC = "CC", "Cédula de ciudadanía"
    TI = "TI", "Tarjeta de identidad"
    CE = "CE", "Cédula de extranjería"
    PP = "PP", "Pasaporte"
    NIT = "NIT", "Número de identificación tributaria"
    DNI = "DNI", "Documento nacional de identidad"


DOCUMENT_NUMBER_MIN_LENGTH = 5
DOCUMENT_NUMBER_MAX_LENGTH = 20
NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 80
PHONE_MIN_LENGTH = 10
PHONE_MAX_LENGTH = 20
EMAIL_MAX_LENGTH = 120
MAX_AGE_YEARS = 120

DOCUMENT_NUMBER_RE = re.compile(r"^[0-9]+$")
NAME_RE = re.compile(r"^[a-zA-ZáéíóúÁÉÍÓÚñÑ\s]+$")

# Characters ignored when matching a phone number against PHONE_FORMATS.
PHONE_NOISE_RE = re.compile(r"[\s\-\(\)]")

PHONE_FORMATS = (
    re.compile(r"^\+573[0-9]{9}$"),  # mobile with country code
    re.compile(r"^3[0-9]{9}$"),  # mobile
    re.compile(r"^601[0-9]{7}$"),  # Bogotá landline
    re.compile(r"^60[2-8][0-9]{7}$"),  # other landlines
)

PHONE_FORMAT_HELP = (
    "Invalid phone format. Use 3XXXXXXXXX (10 digits), +573XXXXXXXXX, "
    "or a landline 60XXXXXXXX."
)

DUPLICATE_DOCUMENT_MSG = "A patient with the same document type and number already exists."
DUPLICATE_DOCUMENT_ON_UPDATE_MSG = "Another patient with the same document type and number already exists."
INVALID_PATIENT_ID_MSG = "Invalid patient ID."
PATIENT_NOT_FOUND_MSG = "Patient not found."
