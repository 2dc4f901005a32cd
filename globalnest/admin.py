from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin

from .models import (
    Feedback,
    HousingListing,
    JobListing,
    Mentor,
    MentorReview,
    MentorSession,
    Profile,
    UniversityStudent,
    User,
)


@admin.register(User)
class GlobalNestUserAdmin(BaseUserAdmin):
	list_display = ('username', 'email', 'role', 'is_staff')
	list_filter = BaseUserAdmin.list_filter + ('role',)
	fieldsets = BaseUserAdmin.fieldsets + (
		('Study Abroad', {'fields': ('role',)}),
	)
	add_fieldsets = BaseUserAdmin.add_fieldsets + (
		('Study Abroad', {'classes': ('wide',), 'fields': ('email', 'role')}),
	)


@admin.register(Profile)
class ProfileAdmin(admin.ModelAdmin):
	list_display = ('name', 'email', 'university', 'field_of_study', 'updated_at')
	search_fields = ('name', 'email', 'university')


@admin.register(HousingListing)
class HousingListingAdmin(admin.ModelAdmin):
	list_display = ('title', 'user', 'price', 'available_from', 'available_until')
	list_filter = ('available_from',)
	search_fields = ('title', 'description', 'user__email')


@admin.register(JobListing)
class JobListingAdmin(admin.ModelAdmin):
	list_display = ('title', 'company', 'job_type', 'salary', 'user')
	list_filter = ('job_type',)
	search_fields = ('title', 'company', 'user__email')


@admin.register(Mentor)
class MentorAdmin(admin.ModelAdmin):
	list_display = ('user', 'title', 'hourly_rate', 'currency', 'rating', 'review_count')
	search_fields = ('title', 'user__email', 'user__profile__name')


@admin.register(MentorSession)
class MentorSessionAdmin(admin.ModelAdmin):
	list_display = ('mentor', 'user', 'date', 'time_slot', 'duration', 'status', 'payment_status', 'amount')
	list_filter = ('status', 'payment_status')


@admin.register(UniversityStudent)
class UniversityStudentAdmin(admin.ModelAdmin):
	list_display = ('name', 'roll_number', 'university_id', 'degree', 'course', 'batch_year', 'status')
	list_filter = ('university_id', 'degree', 'course', 'status')
	search_fields = ('name', 'roll_number')


admin.site.register(MentorReview)
admin.site.register(Feedback)
