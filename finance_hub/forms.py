from decimal import Decimal

from django import forms
from django.core.validators import RegexValidator

month_validator = RegexValidator(r"^\d{4}-(0[1-9]|1[0-2])$", "Usa il formato AAAA-MM.")


class InvoiceForm(forms.Form):
    client_id = forms.IntegerField()
    month = forms.CharField(max_length=7, required=False, validators=[month_validator])
    amount = forms.DecimalField(min_value=Decimal("0"), max_digits=12, decimal_places=2)
    due_date = forms.DateField(
        required=False,
        widget=forms.DateInput(attrs={"class": "date-field", "placeholder": "Seleziona data"}),
    )


class InvoicePaymentForm(forms.Form):
    id = forms.IntegerField()
