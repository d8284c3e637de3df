from django.db import models

from common.models import TimeStampedModel


class StoredDocument(TimeStampedModel):
    """
    Riga chiave/valore: ogni chiave contiene un documento JSON serializzato.
    """

    key = models.CharField(max_length=120, unique=True)
    value = models.BinaryField(default=b"")

    class Meta:
        ordering = ["key"]

    def __str__(self):
        return self.key
