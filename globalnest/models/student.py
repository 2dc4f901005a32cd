from django.db import models


class UniversityStudent(models.Model):
    DEGREE_CHOICES = (
        ("bachelors", "Bachelor's"),
        ("masters", "Master's"),
        ("phd", "Ph.D."),
    )
    COURSE_CHOICES = (
        ("cs", "Computer Science"),
        ("business", "Business Administration"),
        ("engineering", "Engineering"),
        ("arts", "Arts"),
    )
    STATUS_CHOICES = (
        ("current", "Currently Studying"),
        ("passed", "Passed Out"),
    )

    university_id = models.PositiveIntegerField(db_index=True)
    name = models.CharField(max_length=255)
    roll_number = models.CharField(max_length=50)
    degree = models.CharField(max_length=20, choices=DEGREE_CHOICES)
    batch_year = models.PositiveIntegerField()
    course = models.CharField(max_length=20, choices=COURSE_CHOICES)
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default="current")
    profile_picture = models.URLField(blank=True)

    class Meta:
        db_table = "university_students"
        ordering = ["name", "id"]

    def __str__(self) -> str:  # pragma: no cover - simple display helper
        return f"{self.name} ({self.roll_number})"
