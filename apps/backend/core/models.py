from django.conf import settings
from django.db import models


class MemberProfile(models.Model):
    ROLE_SPONSOR = "sponsor"
    ROLE_SPONSEE = "sponsee"
    ROLE_CHOICES = [(ROLE_SPONSOR, "Sponsor"), (ROLE_SPONSEE, "Sponsee")]

    user = models.OneToOneField(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="member_profile")
    role = models.CharField(max_length=16, choices=ROLE_CHOICES)
    display_name = models.CharField(max_length=128, blank=True)
    sobriety_date = models.DateField(null=True, blank=True)
    bio = models.TextField(blank=True)
    preferences = models.JSONField(default=dict, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)


class SponsorRelationship(models.Model):
    STATUS_CHOICES = [("pending", "Pending"), ("active", "Active"), ("ended", "Ended")]

    sponsor = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="sponsee_relationships")
    sponsee = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="sponsor_relationships")
    status = models.CharField(max_length=16, choices=STATUS_CHOICES, default="pending")
    start_date = models.DateTimeField(auto_now_add=True)
    end_date = models.DateTimeField(null=True, blank=True)


class Message(models.Model):
    relationship = models.ForeignKey(SponsorRelationship, on_delete=models.CASCADE, related_name="messages")
    sender = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE)
    content = models.TextField()
    ai_enhanced = models.BooleanField(default=False)
    ai_suggestion = models.TextField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        indexes = [models.Index(fields=["relationship", "-created_at"], name="core_msg_rel_created_idx")]


class ProgressEntry(models.Model):
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE)
    date = models.DateTimeField(auto_now_add=True)
    mood = models.PositiveSmallIntegerField()
    gratitude_list = models.JSONField(default=list, blank=True)
    challenges_faced = models.TextField(blank=True)
    coping_strategies = models.TextField(blank=True)
    next_steps = models.TextField(blank=True)
    ai_insights = models.TextField(blank=True)


class AIInteraction(models.Model):
    """Append-only audit row for one model call that changed what a user sees."""

    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE)
    message = models.ForeignKey(Message, null=True, blank=True, on_delete=models.SET_NULL)
    mode = models.CharField(max_length=64, default="message_enhancement")
    model = models.CharField(max_length=64, blank=True)
    source = models.CharField(max_length=32, default="unknown")
    prompt = models.TextField()
    response = models.TextField()
    context = models.JSONField(default=dict, blank=True)
    tokens_input = models.IntegerField(null=True, blank=True)
    tokens_output = models.IntegerField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
