from decimal import Decimal

from django import forms

from .records import ClientStatus


class ClientForm(forms.Form):
    name = forms.CharField(max_length=160)
    brand = forms.CharField(max_length=160, required=False)
    retainer = forms.DecimalField(min_value=Decimal("0"), max_digits=12, decimal_places=2, required=False)
    notes = forms.CharField(widget=forms.Textarea, required=False, strip=False)


class ClientFieldForm(forms.Form):
    FIELDS = ("name", "brand", "retainer", "status", "notes")

    id = forms.IntegerField()
    field = forms.ChoiceField(choices=[(name, name) for name in FIELDS])
    value = forms.CharField(required=False, strip=False)

    def clean(self):
        cleaned = super().clean()
        field = cleaned.get("field")
        value = cleaned.get("value") or ""
        if field == "name":
            value = value.strip()
            if not value:
                self.add_error("value", "Il nome del cliente e obbligatorio.")
        elif field == "brand":
            value = value.strip()
        elif field == "retainer":
            retainer = forms.DecimalField(min_value=Decimal("0"), max_digits=12, decimal_places=2, required=False)
            try:
                value = retainer.clean(value.strip()) or Decimal("0")
            except forms.ValidationError as exc:
                self.add_error("value", exc)
        elif field == "status" and value not in ClientStatus.values:
            self.add_error("value", "Stato cliente non valido.")
        cleaned["value"] = value
        return cleaned
