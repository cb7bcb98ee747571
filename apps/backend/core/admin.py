from django.contrib import admin
from .models import AIInteraction, MemberProfile, Message, ProgressEntry, SponsorRelationship

for model in [MemberProfile, SponsorRelationship, Message, ProgressEntry, AIInteraction]:
    admin.site.register(model)
