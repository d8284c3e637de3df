from django import forms

from .records import Task


class TaskForm(forms.Form):
    title = forms.CharField(max_length=160)
    description = forms.CharField(widget=forms.Textarea, required=False, strip=False)
    client_id = forms.IntegerField(required=False)
    assignee = forms.CharField(max_length=120, required=False)
    status = forms.ChoiceField(choices=Task.Status.choices, required=False)
    priority = forms.ChoiceField(choices=Task.Priority.choices, required=False)
    due_date = forms.DateField(
        required=False,
        widget=forms.DateInput(attrs={"class": "date-field", "placeholder": "Seleziona data"}),
    )

    def clean(self):
        cleaned = super().clean()
        cleaned["status"] = cleaned.get("status") or Task.Status.PENDING
        cleaned["priority"] = cleaned.get("priority") or Task.Priority.MEDIUM
        return cleaned


class TaskStatusForm(forms.Form):
    id = forms.IntegerField()
    status = forms.ChoiceField(choices=Task.Status.choices)
