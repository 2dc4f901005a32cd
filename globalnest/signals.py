from django.contrib.auth.signals import user_logged_in, user_logged_out
from django.db.models.signals import post_save
from django.dispatch import receiver

from .models import Profile, User


@receiver(post_save, sender=User)
def create_profile_for_new_user(sender, instance, created, **kwargs):
    if created:
        Profile.objects.get_or_create(user=instance, defaults={"email": instance.email})


@receiver(user_logged_in)
def sync_session_on_login(sender, request, user, **kwargs):
    context = getattr(request, "session_context", None)
    if context is not None:
        context.set_user(user)


@receiver(user_logged_out)
def sync_session_on_logout(sender, request, user, **kwargs):
    context = getattr(request, "session_context", None)
    if context is not None:
        context.set_user(None)
