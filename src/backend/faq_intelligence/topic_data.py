# faq_intelligence/topic_data.py
#
# Topic patterns used by the answer generator once intent detection has
# nothing to say. Phrases are literal substrings; patterns are single words.

from dataclasses import dataclass
from typing import Tuple

from .intent_data import (
    INTENT_ANSWERS, RULES_ANSWER, PASSWORD_ANSWER, TAX_ANSWER, MULTIPLE_PROJECTS_ANSWER,
    WORK_REJECTION_ANSWER, MINIMUM_BID_ANSWER, ABOUT_ANSWER,
)


@dataclass(frozen=True)
class TopicResponse:
    phrases: Tuple[str, ...]
    patterns: Tuple[str, ...]
    response: str


# Opening sentence of the generic answer; callers use it to tell the fallback apart
FALLBACK_OPENING = "Thanks for your question! While I don't have a specific pre-written answer"

FALLBACK_TEMPLATE = (
    FALLBACK_OPENING + " for \"{question}\", here is what might help: HustleKE is Kenya's freelance "
    "marketplace where you can find work, hire talent, and get paid securely through M-Pesa escrow. For detailed "
    "help, visit Dashboard > Settings or contact our support team at /contact. They typically respond within 24 "
    "hours. You can also browse our FAQ categories above for answers to common questions about payments, fees, "
    "proposals, and more."
)


TOPIC_RESPONSES: Tuple[TopicResponse, ...] = (
    TopicResponse(
        ("bid more than", "bid higher", "bid over budget", "bid amount", "overbid", "budget limit", "bid too"),
        ("bid", "budget", "overbid"),
        INTENT_ANSWERS["bidding_budget"],
    ),
    TopicResponse(
        ("share contact", "share phone", "share email", "exchange contact", "off platform", "outside platform",
         "direct contact", "personal detail", "give number", "whatsapp"),
        ("share", "contact", "phone", "email", "whatsapp", "telegram"),
        INTENT_ANSWERS["contact_sharing"],
    ),
    TopicResponse(
        ("get paid", "receive payment", "earn money", "when paid", "how paid"),
        ("paid", "pay", "payment", "payout", "earn", "money", "receive", "income"),
        "On HustleKE, you get paid through M-Pesa escrow. Here is how it works: when a client hires you and "
        "accepts your proposal, they fund the escrow. Once you complete the work and the client approves it, "
        "payment is released to your M-Pesa wallet instantly, usually within seconds. The platform charges a "
        "small service fee (6% on Free, 4% on Pro plan). To withdraw, go to Dashboard > Wallet.",
    ),
    TopicResponse(
        ("service fee", "how much charge", "platform fee"),
        ("fee", "charge", "cost", "price", "commission", "deduct", "percent"),
        "HustleKE charges a service fee on completed transactions: 6% on the Free plan and 4% on the Pro plan "
        "(KES 500/month). This is the only platform charge: no hidden fees, no monthly fees on the Free plan. "
        "Standard M-Pesa transaction fees from Safaricom may apply on withdrawals. Pro plan pays for itself with "
        "just one decent project.",
    ),
    TopicResponse(
        ("escrow work", "payment protection"),
        ("escrow",),
        "Escrow is our payment protection system. When a client hires you, they deposit funds into escrow via "
        "M-Pesa. The money is held securely and neither party can take it. Once you complete the work and the "
        "client approves, funds are released instantly to your wallet. If there is a disagreement, either party "
        "can open a dispute and our team resolves it within 48 hours.",
    ),
    TopicResponse(
        ("get started", "sign up", "create account", "first time"),
        ("start", "begin", "join", "register", "signup", "new", "onboard"),
        "Getting started on HustleKE is easy and free! Sign up with your email and phone number, verify your "
        "identity with your national ID (takes ~24 hours), create your profile with skills and portfolio, then "
        "start browsing and applying to jobs. You will need an M-Pesa registered number for payments. Our AI "
        "will recommend the best opportunities based on your skills.",
    ),
    TopicResponse(
        ("write proposal", "good proposal", "apply for job", "submit proposal"),
        ("proposal", "apply", "bid", "submit", "cover letter", "application"),
        "To apply for a job, click \"Apply\" on any job listing and write your proposal. Tips for a winning "
        "proposal: address the client's specific needs, showcase relevant past work, be clear about your "
        "timeline, set a competitive bid amount, and use the AI Proposal Polisher to optimize your writing. Free "
        "users get 10 proposals/day, Pro gets 20/day.",
    ),
    TopicResponse(
        ("top up", "add money", "fund wallet", "withdraw money"),
        ("wallet", "balance", "topup", "deposit", "withdraw", "mpesa", "m-pesa", "transfer"),
        "Your HustleKE wallet stores your earnings and is connected to M-Pesa. To top up: go to Dashboard > "
        "Wallet, enter your M-Pesa number and amount, confirm via STK push. To withdraw: enter the amount and it "
        "goes straight to your M-Pesa. Wallet also handles subscription payments and escrow transactions.",
    ),
    TopicResponse(
        ("pro plan", "upgrade pro", "pro worth", "pro benefit"),
        ("pro", "premium", "upgrade", "subscription", "plan", "subscribe", "membership"),
        "The Pro plan costs KES 500/month and gives you: lower 4% service fee (vs 6%), 20 proposals/day (vs 10), "
        "priority in job matching, advanced analytics on your dashboard, a PRO badge on your profile, and "
        "priority support. Cancel anytime with no lock-in. Try promo code EARLYBIRD for a free first month! "
        "Upgrade from Dashboard > Settings > Subscription.",
    ),
    TopicResponse(
        ("open dispute", "file dispute", "report problem"),
        ("dispute", "problem", "issue", "complaint", "refund", "conflict", "scam", "fraud", "legit",
         "legitimate", "trustworthy", "reliable", "fake"),
        "HustleKE is a legitimate, secure freelance marketplace. We protect all payments through M-Pesa escrow, "
        "so funds are held safely until work is approved. All users go through identity verification. If there "
        "is a dispute, our resolution team reviews evidence within 48 hours. We use bank-level encryption and "
        "Row Level Security. If you have a specific issue, open a dispute from Dashboard > Escrow or contact "
        "support at /contact.",
    ),
    TopicResponse(
        ("verify account", "verify identity", "id verification"),
        ("verify", "verification", "identity", "validated"),
        "Account verification requires a valid national ID or passport and phone number verification. Most "
        "verifications complete within 24 hours. Once verified, you get a verified badge, higher Hustle Score, "
        "and access to more jobs. Your Hustle Score (0-100) is based on completed jobs, reviews, response time, "
        "and platform activity.",
    ),
    TopicResponse(
        ("update profile", "edit profile", "change profile"),
        ("profile", "portfolio", "photo", "avatar", "bio", "skills", "experience", "education"),
        "You can customize your profile from Dashboard > Settings. Add your professional bio, skills, hourly "
        "rate, education, and certifications. Upload a profile photo (JPEG/PNG/WebP, under 2MB). In the "
        "Portfolio tab, create project categories and showcase your work with up to 10 images per project. A "
        "complete profile helps you win more jobs.",
    ),
    TopicResponse(
        ("find job", "browse job", "post job", "hire freelancer"),
        ("job", "project", "gig", "task", "find", "browse", "search", "hire", "post"),
        "As a freelancer, browse available jobs at /jobs and filter by category, budget, and skills. As a "
        "client, post your project with requirements and budget, then review proposals from qualified "
        "freelancers. You can message candidates, compare profiles, and hire the best fit. Fund the escrow and "
        "the project begins!",
    ),
    TopicResponse(
        ("send message", "contact support", "reach out"),
        ("message", "chat", "communicate", "talk", "support", "help", "reach"),
        "You can message any freelancer or client you are working with through Dashboard > Messages. "
        "Conversations are organized by job. For platform support, visit /contact or email support@hustleke.com. "
        "Pro users get priority support. Our team typically responds within 24 hours.",
    ),
    TopicResponse(
        ("cancel subscription", "stop subscription", "delete account"),
        ("cancel", "unsubscribe", "stop", "terminate", "close", "deactivate"),
        "To cancel your Pro subscription, go to Dashboard > Settings > Subscription and click Cancel. You keep "
        "all Pro benefits until your current billing period ends. To delete your account entirely, contact "
        "support. You must complete all active contracts and withdraw all funds first.",
    ),
    TopicResponse(
        ("enterprise plan", "team plan", "business plan"),
        ("enterprise", "team", "company", "business", "corporate", "bulk", "organization"),
        "Enterprise plan is for businesses and teams. It includes: custom fee rates from 3%, unlimited "
        "proposals, team management and bulk hiring, API access, a dedicated account manager, and 2-hour support "
        "SLAs. Contact us at /enterprise or /contact to set up your Enterprise account.",
    ),
    TopicResponse(
        ("about hustleke", "what is hustleke", "tell me about"),
        ("hustleke", "platform", "website", "site", "about", "overview"),
        ABOUT_ANSWER,
    ),
    TopicResponse(
        ("leave review", "give feedback", "star rating"),
        ("review", "feedback", "rating", "star", "testimonial", "reputation"),
        "After completing a job, both freelancers and clients can leave reviews with star ratings (1-5) and "
        "sub-ratings for communication, quality, and timeliness. Reviews are public and contribute to your "
        "Hustle Score. Higher-rated freelancers get priority in search results. You can view reviews on any "
        "user's profile page.",
    ),
    TopicResponse(
        ("how long", "how fast", "how quick", "time take"),
        ("time", "long", "duration", "deadline", "fast", "quick", "slow", "speed", "turnaround"),
        "Timelines depend on the project scope agreed between client and freelancer. Escrow payments are "
        "released instantly once the client approves the work. Account verification takes about 24 hours. Pro "
        "subscription activates immediately. Our support team responds within 24 hours. M-Pesa transactions "
        "process in seconds.",
    ),
    TopicResponse(
        ("allowed", "can i", "am i allowed", "is it okay", "permitted", "rules", "policy", "terms"),
        ("allowed", "permitted", "rules", "policy", "terms", "guidelines", "forbidden", "prohibited", "banned"),
        RULES_ANSWER,
    ),
    TopicResponse(
        ("multiple account", "two account", "second account"),
        ("multiple", "accounts", "duplicate", "second"),
        "Each user should have only one HustleKE account. Creating multiple accounts to bypass proposal limits "
        "or manipulate reviews violates our terms of service and can result in account suspension. If you need "
        "to switch between freelancer and client roles, you can do both from the same account. Your dashboard "
        "adapts to your role automatically.",
    ),
    TopicResponse(
        ("change email", "change phone", "change password", "update email", "update phone", "update password",
         "forgot password", "reset password"),
        ("password", "email", "phone", "reset", "forgot", "change"),
        PASSWORD_ANSWER,
    ),
    TopicResponse(
        ("how many jobs", "job limit", "simultaneous", "at once", "same time", "multiple jobs"),
        ("many", "limit", "simultaneous", "multiple", "several"),
        MULTIPLE_PROJECTS_ANSWER,
    ),
    TopicResponse(
        ("incomplete work", "not finished", "bad quality", "poor work", "not satisfied", "client reject",
         "revision", "redo"),
        ("incomplete", "finished", "quality", "poor", "satisfied", "reject", "revision", "redo", "rework"),
        WORK_REJECTION_ANSWER,
    ),
    TopicResponse(
        ("tax", "vat", "invoice", "receipt", "kra"),
        ("tax", "vat", "invoice", "receipt", "kra", "taxation"),
        TAX_ANSWER,
    ),
    TopicResponse(
        ("minimum bid", "minimum amount", "minimum budget", "lowest bid", "minimum project"),
        ("minimum", "lowest", "smallest"),
        MINIMUM_BID_ANSWER,
    ),
)
