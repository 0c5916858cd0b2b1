# faq_intelligence/faq_data.py
#
# Static knowledge base. Built once at import and never mutated.

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Tuple


@dataclass(frozen=True)
class FaqEntry:
    id: str
    category: str
    question: str
    answer: str
    keywords: Tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self, include_keywords: bool = False) -> Dict:
        data = {
            "id": self.id,
            "category": self.category,
            "question": self.question,
            "answer": self.answer,
        }
        if include_keywords:
            data["keywords"] = list(self.keywords)
        return data


# Synonym groups: root word -> every word treated as equivalent to it.
# Lookups are exact-match on the synonym lists (never substring).
SYNONYMS = MappingProxyType({
    "paid": ("pay", "payment", "payout", "earn", "earnings", "income", "money", "receive", "compensate",
             "compensation", "salary", "wage", "cash", "get paid", "withdraw"),
    "fee": ("fees", "charge", "charges", "cost", "costs", "price", "pricing", "commission", "deduction",
            "percent", "percentage", "rate"),
    "escrow": ("escrow", "hold", "holding", "secure", "secured", "protection", "safeguard", "trust"),
    "wallet": ("wallet", "balance", "funds", "account", "top up", "topup", "deposit", "money"),
    "proposal": ("proposal", "proposals", "bid", "bids", "apply", "application", "submit", "cover letter"),
    "job": ("job", "jobs", "project", "projects", "gig", "gigs", "work", "task", "tasks", "hustle", "hustles",
            "hire", "hiring"),
    "profile": ("profile", "account", "settings", "bio", "portfolio", "avatar", "photo"),
    "verify": ("verify", "verification", "verified", "identity", "id", "confirm", "validate", "validated"),
    "dispute": ("dispute", "problem", "issue", "conflict", "complaint", "refund", "disagreement"),
    "pro": ("pro", "premium", "upgrade", "subscription", "plan", "subscribe", "membership"),
    "cancel": ("cancel", "cancellation", "unsubscribe", "stop", "end", "terminate", "quit"),
    "sign up": ("sign up", "signup", "register", "registration", "create account", "join", "get started", "start",
                "begin", "onboard"),
    "mpesa": ("mpesa", "m-pesa", "safaricom", "stk", "paybill", "till", "mobile money"),
    "secure": ("secure", "security", "safe", "safety", "privacy", "private", "encrypt", "encrypted", "protection",
               "data"),
    "score": ("score", "hustle score", "rating", "reputation", "trust", "rank", "ranking"),
    "fast": ("fast", "quick", "quickly", "instant", "instantly", "speed", "how long", "time", "duration", "soon"),
    "delete": ("delete", "remove", "deactivate", "close", "shut down"),
})


FAQ_KNOWLEDGE_BASE: Tuple[FaqEntry, ...] = (

    # ==================================================
    # Fees
    # ==================================================

    FaqEntry(
        id="fee-1",
        category="fees",
        question="What is the service fee?",
        answer="HustleKE charges 6% on the Free plan and 4% on the Pro plan per completed transaction. "
               "This is deducted from the project payment when funds are released from escrow.",
        keywords=("fee", "charge", "percent", "cost", "service fee", "how much", "deduct", "commission"),
    ),
    FaqEntry(
        id="fee-2",
        category="fees",
        question="Are there hidden fees?",
        answer="No. The service fee is the only platform charge. Standard M-Pesa transaction fees from "
               "Safaricom may apply for withdrawals.",
        keywords=("hidden", "extra", "other fee", "additional", "surprise"),
    ),
    FaqEntry(
        id="fee-3",
        category="fees",
        question="How does Pro reduce my fees?",
        answer="Pro plan members pay only 4% per transaction instead of 6%. On a KES 50,000 project, that "
               "saves you KES 1,000. The Pro subscription costs KES 500/month, so it pays for itself with one "
               "decent project.",
        keywords=("pro", "reduce", "save", "discount", "lower fee", "upgrade"),
    ),

    # ==================================================
    # Payments
    # ==================================================

    FaqEntry(
        id="pay-1",
        category="payments",
        question="How does escrow work?",
        answer="When a client accepts your proposal, they fund the escrow with M-Pesa. The money is held "
               "securely until you complete the work and the client approves it. Then funds are released to "
               "your wallet instantly.",
        keywords=("escrow", "hold", "secure", "protect", "safe", "fund"),
    ),
    FaqEntry(
        id="pay-2",
        category="payments",
        question="How fast do I get paid?",
        answer="Once the client approves your work, payment is released to your M-Pesa wallet instantly, "
               "usually within seconds.",
        keywords=("paid", "fast", "instant", "when", "receive", "payout", "withdraw", "mpesa", "m-pesa",
                  "get paid"),
    ),
    FaqEntry(
        id="pay-3",
        category="payments",
        question="What payment methods are accepted?",
        answer="All payments on HustleKE are processed through M-Pesa. You top up your wallet via M-Pesa "
               "STK Push, and withdraw to your M-Pesa number.",
        keywords=("payment method", "mpesa", "m-pesa", "bank", "visa", "card", "pay how"),
    ),
    FaqEntry(
        id="pay-4",
        category="payments",
        question="How do I top up my wallet?",
        answer="Go to Dashboard > Wallet, enter your M-Pesa phone number and amount, then click Top Up. "
               "You will receive an STK push on your phone to confirm the transaction.",
        keywords=("top up", "deposit", "add money", "fund", "wallet", "load"),
    ),

    # ==================================================
    # Plans
    # ==================================================

    FaqEntry(
        id="plan-1",
        category="plans",
        question="Can I cancel Pro anytime?",
        answer="Yes! Pro is a monthly subscription with no lock-in. Cancel anytime from Dashboard > Settings "
               "> Subscription. You keep all Pro benefits until your current billing period ends.",
        keywords=("cancel", "stop", "unsubscribe", "quit", "end subscription"),
    ),
    FaqEntry(
        id="plan-2",
        category="plans",
        question="What happens when Pro expires?",
        answer="If auto-renew is on and your wallet has funds, it renews automatically. If not, you get a "
               "3-day grace period to top up. After that, you revert to the Free plan.",
        keywords=("expire", "renew", "auto", "grace", "lapse", "end"),
    ),
    FaqEntry(
        id="plan-3",
        category="plans",
        question="Is there a free trial for Pro?",
        answer="We offer promo codes for discounted or free first months. Use code EARLYBIRD for a free "
               "first month when subscribing in Dashboard > Settings > Subscription.",
        keywords=("trial", "free", "promo", "code", "coupon", "test", "try"),
    ),
    FaqEntry(
        id="plan-4",
        category="plans",
        question="What does Enterprise include?",
        answer="Enterprise gives you custom fee rates from 3%, unlimited proposals, team management, bulk "
               "hiring, API access, a dedicated account manager, and 2-hour support SLAs. Contact sales to "
               "set up.",
        keywords=("enterprise", "team", "bulk", "company", "business", "custom", "corporate"),
    ),

    # ==================================================
    # Account
    # ==================================================

    FaqEntry(
        id="acc-1",
        category="account",
        question="How do I verify my account?",
        answer="Go to Dashboard > Settings and complete ID verification. You need a valid national ID or "
               "passport. Most verifications are processed within 24 hours.",
        keywords=("verify", "verification", "id", "identity", "confirm", "validate"),
    ),
    FaqEntry(
        id="acc-2",
        category="account",
        question="How do I update my profile?",
        answer="Go to Dashboard > Settings > Profile tab. You can update your name, bio, skills, hourly rate, "
               "education, certifications, and portfolio there.",
        keywords=("update", "edit", "change", "profile", "information", "details"),
    ),
    FaqEntry(
        id="acc-3",
        category="account",
        question="What is the Hustle Score?",
        answer="Hustle Score is your trust rating (0-100) based on completed jobs, reviews, response time, "
               "verification status, and platform activity. Higher scores get priority in search results and "
               "job matching.",
        keywords=("hustle score", "score", "rating", "trust", "reputation", "rank"),
    ),

    # ==================================================
    # Jobs
    # ==================================================

    FaqEntry(
        id="job-1",
        category="jobs",
        question="How do I write a good proposal?",
        answer="Address the client's specific needs, showcase relevant experience, be clear about your "
               "timeline and approach, set a competitive bid, and use the AI Proposal Polisher to optimize "
               "your writing.",
        keywords=("proposal", "write", "apply", "bid", "submit", "cover letter", "good proposal"),
    ),
    FaqEntry(
        id="job-2",
        category="jobs",
        question="How many proposals can I send per day?",
        answer="Free plan users can send up to 10 proposals per day. Pro plan users get 20 proposals per day. "
               "Enterprise users have unlimited proposals.",
        keywords=("proposal limit", "how many", "per day", "daily", "limit", "maximum"),
    ),
    FaqEntry(
        id="job-3",
        category="jobs",
        question="What if a client doesn't respond?",
        answer="Send a polite follow-up message after 3 days. If there is no response after 7 days, you can "
               "withdraw your proposal and apply to other jobs. Your proposal count is restored when you "
               "withdraw.",
        keywords=("no response", "client silent", "not responding", "ignore", "ghost", "wait"),
    ),

    # ==================================================
    # Safety
    # ==================================================

    FaqEntry(
        id="safe-1",
        category="safety",
        question="What if there is a dispute?",
        answer="Open a dispute from Dashboard > Escrow. Our resolution team reviews evidence from both sides "
               "within 48 hours. With escrow protection, funds stay safe until the dispute is resolved by "
               "release, refund, or fair split.",
        keywords=("dispute", "problem", "issue", "conflict", "disagree", "complaint", "refund"),
    ),
    FaqEntry(
        id="safe-2",
        category="safety",
        question="Is my data secure?",
        answer="Yes. We use bank-level encryption, Supabase Row Level Security policies, and never share your "
               "personal information with third parties. All API routes are rate-limited and validated.",
        keywords=("data", "secure", "privacy", "safe", "encrypt", "hack", "protect"),
    ),
)

FAQ_BY_ID = MappingProxyType({faq.id: faq for faq in FAQ_KNOWLEDGE_BASE})

# Shown by the trending scan when too few questions were detected
POPULAR_FAQ_IDS = ("fee-1", "pay-1", "pay-2", "plan-1", "acc-3", "job-1", "safe-1")
