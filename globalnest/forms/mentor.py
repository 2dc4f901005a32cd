import re

from django import forms
from django.utils import timezone

from ..models import WEEKDAYS, Mentor, MentorReview, MentorSession, parse_time_slot

SLOT_RE = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")
REVIEW_MIN_LENGTH = 10
RATING_CHOICES = [(value, f"{value} star{'s' if value != 1 else ''}") for value in range(5, 0, -1)]


def split_tags(raw: str) -> list[str]:
    return [part.strip() for part in (raw or "").split(",") if part.strip()]


class MentorForm(forms.ModelForm):
    expertise_text = forms.CharField(
        label="Expertise",
        help_text="Comma separated, e.g. Visa, Housing, Scholarships",
        widget=forms.TextInput(attrs={"class": "form-control"}),
    )
    languages_text = forms.CharField(
        label="Languages",
        required=False,
        widget=forms.TextInput(attrs={"class": "form-control"}),
    )
    badges_text = forms.CharField(
        label="Badges",
        required=False,
        widget=forms.TextInput(attrs={"class": "form-control"}),
    )

    class Meta:
        model = Mentor
        fields = ["title", "bio", "hourly_rate", "currency"]
        widgets = {
            "title": forms.TextInput(attrs={"class": "form-control"}),
            "bio": forms.Textarea(attrs={"class": "form-control", "rows": 4}),
            "hourly_rate": forms.NumberInput(attrs={"class": "form-control", "min": 0, "step": "0.01"}),
            "currency": forms.TextInput(attrs={"class": "form-control", "maxlength": 3}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        availability = (self.instance.availability if self.instance and self.instance.pk else None) or {}
        for day in WEEKDAYS:
            self.fields[f"slots_{day}"] = forms.CharField(
                label=day.capitalize(),
                required=False,
                initial=", ".join(availability.get(day, [])),
                widget=forms.TextInput(attrs={"class": "form-control", "placeholder": "09:00, 14:00"}),
            )
        if self.instance and self.instance.pk:
            self.fields["expertise_text"].initial = ", ".join(self.instance.expertise or [])
            self.fields["languages_text"].initial = ", ".join(self.instance.languages or [])
            self.fields["badges_text"].initial = ", ".join(self.instance.badges or [])

    def availability_fields(self):
        return [self[f"slots_{day}"] for day in WEEKDAYS]

    def clean_currency(self):
        return (self.cleaned_data.get("currency") or "USD").strip().upper()

    def clean(self):
        cleaned_data = super().clean()
        availability = {}
        for day in WEEKDAYS:
            slots = split_tags(cleaned_data.get(f"slots_{day}", ""))
            invalid = [slot for slot in slots if not SLOT_RE.match(slot)]
            if invalid:
                self.add_error(f"slots_{day}", f"Use HH:MM times; could not read {', '.join(invalid)}.")
                continue
            if slots:
                availability[day] = sorted(set(slots))
        cleaned_data["availability"] = availability
        cleaned_data["expertise"] = split_tags(cleaned_data.get("expertise_text", ""))
        cleaned_data["languages"] = split_tags(cleaned_data.get("languages_text", ""))
        cleaned_data["badges"] = split_tags(cleaned_data.get("badges_text", ""))
        if "expertise_text" in cleaned_data and not cleaned_data["expertise"]:
            self.add_error("expertise_text", "Add at least one area of expertise.")
        return cleaned_data

    def mentor_fields(self) -> dict:
        data = self.cleaned_data
        return {
            "title": data["title"],
            "bio": data.get("bio", ""),
            "hourly_rate": data["hourly_rate"],
            "currency": data["currency"],
            "expertise": data["expertise"],
            "languages": data["languages"],
            "badges": data["badges"],
            "availability": data["availability"],
        }


class ReviewForm(forms.ModelForm):
    rating = forms.TypedChoiceField(
        choices=RATING_CHOICES,
        coerce=int,
        initial=5,
        widget=forms.Select(attrs={"class": "form-select"}),
    )
    comment = forms.CharField(
        strip=False,
        widget=forms.Textarea(
            attrs={"class": "form-control", "rows": 4, "placeholder": "Share your experience with this mentor..."}
        ),
    )

    class Meta:
        model = MentorReview
        fields = ["rating", "comment"]

    def clean_comment(self):
        comment = self.cleaned_data.get("comment") or ""
        if len(comment) < REVIEW_MIN_LENGTH:
            raise forms.ValidationError(f"Comment must be at least {REVIEW_MIN_LENGTH} characters long.")
        return comment


class BookingForm(forms.Form):
    date = forms.DateField(widget=forms.DateInput(attrs={"type": "date", "class": "form-control"}))
    time_slot = forms.CharField(widget=forms.TimeInput(attrs={"type": "time", "class": "form-control"}))
    duration = forms.TypedChoiceField(
        choices=MentorSession.DURATION_CHOICES,
        coerce=int,
        initial=60,
        widget=forms.Select(attrs={"class": "form-select"}),
    )
    notes = forms.CharField(
        required=False,
        widget=forms.Textarea(attrs={"class": "form-control", "rows": 3, "placeholder": "What would you like to discuss?"}),
    )

    def __init__(self, *args, mentor=None, **kwargs):
        super().__init__(*args, **kwargs)
        if mentor is None:
            raise ValueError("BookingForm requires a mentor instance")
        self.mentor = mentor

    def clean_date(self):
        value = self.cleaned_data["date"]
        if value < timezone.localdate():
            raise forms.ValidationError("Please choose a date that is not in the past.")
        return value

    def clean_time_slot(self):
        slot = (self.cleaned_data.get("time_slot") or "").strip()
        try:
            parsed = parse_time_slot(slot)
        except ValueError:
            raise forms.ValidationError("Please select a time slot.")
        return parsed.strftime("%H:%M")

    def clean(self):
        cleaned_data = super().clean()
        day = cleaned_data.get("date")
        slot = cleaned_data.get("time_slot")
        if day and slot:
            published = self.mentor.slots_for(day)
            if published and slot not in published:
                self.add_error("time_slot", "This mentor is not available at that time.")
        return cleaned_data
