HOT_LEADS = """🔥 **Your Hot Leads:**

1. **Ahmed Hassan** - Villa in Emirates Hills ($2.4M)
   • Last contact: 3 hours ago
   • Status: Very interested, requesting second viewing

2. **Sarah Al-Maktoum** - Penthouse in Dubai Marina ($1.8M)
   • Viewing scheduled for tomorrow
   • Pre-qualified, ready to negotiate

3. **James Mitchell** - Palm Jumeirah Villa ($3.2M)
   • International buyer from UK
   • Flying in next week for viewing

Would you like me to draft a personalized follow-up for any of these leads?"""

DRAFT_MESSAGE = """✉️ **Here's a personalized follow-up template:**

"Dear [Name],

I hope this message finds you well. It was wonderful speaking with you about the [Property Type] in [Location].

I wanted to share that I've identified a few exclusive listings that match your preferences perfectly. Given your interest in [specific feature], I believe these properties deserve your attention.

Would you be available for a private viewing this week? I can arrange a convenient time that suits your schedule.

Looking forward to helping you find your perfect home.

Warm regards,
Zee"

*Shall I customize this for a specific client?*"""

TASKS_TODAY = """📋 **Today's Priority Tasks:**

✅ **Completed:**
- Morning market report review
- Responded to 3 inquiry emails

⏰ **Scheduled:**
- 2:00 PM - Viewing with Sarah Al-Maktoum (Marina Gate)
- 4:30 PM - Call with Ahmed Hassan (Second viewing)

📝 **Pending:**
- Send market update to 5 warm leads
- Prepare property comparison for James Mitchell
- Follow up with legal team on contract

Would you like me to help prioritize or reschedule any tasks?"""

PIPELINE_SUMMARY = """📊 **Pipeline Summary:**

| Stage | Leads | Potential Value |
|-------|-------|-----------------|
| 🟢 New | 6 | $8.4M |
| 🟡 Qualified | 4 | $6.2M |
| 🟠 Viewing | 3 | $7.4M |
| 🔴 Negotiation | 2 | $5.0M |

**Total Pipeline:** $27M
**Your Projected Commission (2%):** $540,000

💡 *Focus on the negotiation stage - you're 2 deals away from a record month!*"""

PROPERTY_MATCHES = """🏠 **Property Matches for Your Hot Leads:**

**For Ahmed Hassan (Budget: $2-3M, Villa)**
1. Emirates Hills - 6BR, Golf View - $2.4M ⭐
2. Al Barari - 5BR, Garden Villa - $2.8M
3. Jumeirah Golf Estates - 5BR, Modern - $2.2M

**For Sarah Al-Maktoum (Budget: $1.5-2M, Penthouse)**
1. Marina Gate - 3BR, Full Marina View - $1.8M ⭐
2. The Address, Downtown - 3BR, Burj View - $1.9M

Would you like me to prepare detailed comparison sheets?"""


def capability_overview(message: str) -> str:
    return f"""I understand you're asking about "{message}".

As your AI copilot, I can help you with:
• 🔥 **Lead Analysis** - Prioritize your hottest opportunities
• ✉️ **Message Drafting** - Personalized client communications
• 📊 **Pipeline Review** - Track your deals and projections
• 📋 **Task Management** - Stay on top of follow-ups
• 🏠 **Property Matching** - Find perfect fits for clients

How can I assist you today?"""
