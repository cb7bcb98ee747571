from rest_framework import serializers

from .models import Message, ProgressEntry, SponsorRelationship
from .services.payments import PRODUCTS


class ChatRequestSerializer(serializers.Serializer):
    userId = serializers.IntegerField(min_value=1)
    content = serializers.CharField(max_length=4000, trim_whitespace=False)


class SendMessageSerializer(serializers.Serializer):
    relationshipId = serializers.IntegerField(min_value=1)
    senderId = serializers.IntegerField(min_value=1)
    content = serializers.CharField(max_length=4000, trim_whitespace=False)
    useAI = serializers.BooleanField(default=True)

    def validate(self, attrs):
        relationship = SponsorRelationship.objects.filter(id=attrs["relationshipId"]).first()
        if relationship is None:
            raise serializers.ValidationError({"relationshipId": "Relationship not found."})
        if attrs["senderId"] not in (relationship.sponsor_id, relationship.sponsee_id):
            raise serializers.ValidationError({"senderId": "Sender is not part of this relationship."})
        return attrs


class MessageSerializer(serializers.ModelSerializer):
    relationshipId = serializers.IntegerField(source="relationship_id")
    senderId = serializers.IntegerField(source="sender_id")
    aiEnhanced = serializers.BooleanField(source="ai_enhanced")
    aiSuggestion = serializers.CharField(source="ai_suggestion", allow_null=True)
    timestamp = serializers.DateTimeField(source="created_at")

    class Meta:
        model = Message
        fields = ["id", "relationshipId", "senderId", "content", "aiEnhanced", "aiSuggestion", "timestamp"]


class ProgressEntrySerializer(serializers.ModelSerializer):
    userId = serializers.IntegerField(source="user_id", read_only=True)
    mood = serializers.IntegerField(min_value=1, max_value=10)
    gratitudeList = serializers.ListField(child=serializers.CharField(max_length=255), source="gratitude_list", required=False)
    challengesFaced = serializers.CharField(source="challenges_faced", required=False, allow_blank=True)
    copingStrategies = serializers.CharField(source="coping_strategies", required=False, allow_blank=True)
    nextSteps = serializers.CharField(source="next_steps", required=False, allow_blank=True)
    aiInsights = serializers.CharField(source="ai_insights", read_only=True)

    class Meta:
        model = ProgressEntry
        fields = [
            "id",
            "userId",
            "date",
            "mood",
            "gratitudeList",
            "challengesFaced",
            "copingStrategies",
            "nextSteps",
            "aiInsights",
        ]
        read_only_fields = ["id", "date"]


class PaymentIntentSerializer(serializers.Serializer):
    productType = serializers.ChoiceField(choices=list(PRODUCTS))


class SubscriptionSerializer(serializers.Serializer):
    email = serializers.EmailField()


class SponsorCommunicationSerializer(serializers.Serializer):
    userId = serializers.IntegerField()
    messageContent = serializers.CharField()
    recipientEmail = serializers.EmailField()


class PaymentNotificationSerializer(serializers.Serializer):
    userId = serializers.IntegerField()
    paymentStatus = serializers.CharField()
    amount = serializers.IntegerField(min_value=1)
    customerEmail = serializers.EmailField()
