# faq_intelligence/intent_data.py
#
# Intent registry. INTENT_DEFS is ORDERED: detection is first-match-wins, so
# moving an entry changes which intent a query with overlapping wording gets.
# Reordering must come with test updates.

from dataclasses import dataclass
from types import MappingProxyType
from typing import Tuple


@dataclass(frozen=True)
class IntentDef:
    intent: str
    faq_ids: Tuple[str, ...]
    # Any phrase found verbatim in the query fires the intent
    phrases: Tuple[str, ...]
    # AND-groups: every keyword in one group must be present
    keyword_sets: Tuple[Tuple[str, ...], ...]


INTENT_DEFS: Tuple[IntentDef, ...] = (
    IntentDef(
        "bidding_budget", (),
        ("bid more than budget", "bid over budget", "bid above budget", "overbid", "bid too high", "bid too much",
         "budget limit"),
        (("bid", "budget"), ("bid", "more"), ("bid", "higher"), ("bid", "exceed"), ("bid", "above"),
         ("bid", "over")),
    ),
    IntentDef(
        "contact_sharing", (),
        ("share contact", "share phone", "share email", "exchange contact", "give number", "off platform",
         "outside platform", "direct contact", "share personal", "whatsapp"),
        (("share", "contact"), ("share", "phone"), ("share", "email"), ("share", "number"),
         ("exchange", "contact"), ("allowed", "contact"), ("personal", "contact")),
    ),
    IntentDef(
        "getting_paid", ("pay-2",),
        ("get paid", "receive payment", "receive money", "earn money", "how paid", "when paid"),
        (("get", "paid"), ("receive", "payment"), ("earn", "money")),
    ),
    IntentDef(
        "service_fee", ("fee-1",),
        ("service fee", "platform fee", "transaction fee", "how much charge"),
        (("service", "fee"), ("platform", "fee"), ("how", "much", "charge")),
    ),
    IntentDef(
        "escrow_system", ("pay-1",),
        ("escrow work", "escrow protect", "payment protection", "money safe", "funds held"),
        (("escrow", "work"), ("escrow", "protect")),
    ),
    IntentDef(
        "wallet_topup", ("pay-4",),
        ("top up", "add money", "fund wallet", "deposit money", "load wallet"),
        (("top", "up"), ("add", "money"), ("fund", "wallet")),
    ),
    IntentDef(
        "cancel_sub", ("plan-1",),
        ("cancel pro", "cancel subscription", "stop subscription", "unsubscribe"),
        (("cancel", "pro"), ("cancel", "subscription"), ("stop", "subscription")),
    ),
    IntentDef(
        "hustle_score", ("acc-3",),
        ("hustle score", "trust score", "trust rating"),
        (("hustle", "score"), ("trust", "score")),
    ),
    IntentDef(
        "writing_proposals", ("job-1",),
        ("write proposal", "good proposal", "winning proposal", "proposal tips"),
        (("write", "proposal"), ("good", "proposal"), ("proposal", "tips")),
    ),
    IntentDef(
        "dispute_process", ("safe-1",),
        ("open dispute", "file dispute", "raise dispute", "report issue", "report problem"),
        (("open", "dispute"), ("file", "dispute"), ("report", "issue")),
    ),
    IntentDef(
        "hidden_fees", ("fee-2",),
        ("hidden fee", "extra charge", "additional cost", "surprise fee"),
        (("hidden", "fee"), ("extra", "charge")),
    ),
    IntentDef(
        "pro_plan", ("fee-3", "plan-1"),
        ("pro plan", "pro benefit", "upgrade pro", "pro worth"),
        (("pro", "plan"), ("upgrade", "pro"), ("pro", "benefit")),
    ),
    IntentDef(
        "verification", ("acc-1",),
        ("verify account", "verify identity", "id verification", "account verification"),
        (("verify", "account"), ("verify", "identity")),
    ),
    IntentDef(
        "profile_update", ("acc-2",),
        ("update profile", "edit profile", "change profile", "profile settings"),
        (("update", "profile"), ("edit", "profile")),
    ),
    IntentDef(
        "client_no_response", ("job-3",),
        ("client not respond", "client silent", "no response from client", "client ignore", "client ghost"),
        (("client", "respond"), ("client", "silent"), ("client", "ghost"), ("client", "ignore")),
    ),
    IntentDef(
        "data_security", ("safe-2",),
        ("data secure", "data safe", "data privacy", "information safe", "is it safe"),
        (("data", "secure"), ("data", "safe"), ("data", "privacy")),
    ),
    IntentDef(
        "free_trial", ("plan-3",),
        ("free trial", "try pro", "test pro", "promo code", "discount code"),
        (("free", "trial"), ("promo", "code"), ("discount", "code")),
    ),
    IntentDef(
        "payment_methods", ("pay-3",),
        ("payment method", "pay with", "use visa", "use card", "use bank", "use paypal", "mpesa only"),
        (("payment", "method"), ("use", "paypal"), ("use", "card"), ("use", "visa"), ("use", "bank")),
    ),
    IntentDef(
        "proposal_limits", ("job-2",),
        ("proposal limit", "how many proposal", "proposals per day", "daily limit"),
        (("proposal", "limit"), ("proposals", "per", "day")),
    ),

    # Intents below only have generated answers
    IntentDef(
        "tax_earnings", (),
        ("pay tax", "tax on earnings", "vat", "invoice", "receipt", "kra"),
        (("tax", "earnings"), ("pay", "tax"), ("tax", "income"), ("kra",)),
    ),
    IntentDef(
        "multiple_projects", (),
        ("multiple projects", "multiple jobs", "at once", "same time", "simultaneous", "how many jobs",
         "job limit"),
        (("multiple", "projects"), ("multiple", "jobs"), ("many", "jobs"), ("simultaneous",),
         ("work", "multiple")),
    ),
    IntentDef(
        "work_rejection", (),
        ("reject my work", "rejects work", "bad quality", "poor work", "not satisfied", "revision", "redo work",
         "incomplete work"),
        (("reject", "work"), ("client", "reject"), ("bad", "quality"), ("poor", "work"), ("request", "revision"),
         ("not", "satisfied"), ("redo", "work")),
    ),
    IntentDef(
        "rules_policies", (),
        ("am i allowed", "is it allowed", "is it okay", "permitted", "rules", "policy", "terms of service",
         "guidelines"),
        (("allowed",), ("permitted",), ("rules",), ("policy",), ("guidelines",)),
    ),
    IntentDef(
        "password_account", (),
        ("change password", "forgot password", "reset password", "change email", "change phone", "update email",
         "update phone"),
        (("change", "password"), ("forgot", "password"), ("reset", "password"), ("change", "email"),
         ("change", "phone")),
    ),
    IntentDef(
        "minimum_bid", (),
        ("minimum bid", "minimum amount", "minimum budget", "lowest bid", "minimum project"),
        (("minimum", "bid"), ("minimum", "amount"), ("lowest", "bid")),
    ),
    IntentDef(
        "multiple_accounts", (),
        ("multiple account", "two account", "second account"),
        (("multiple", "account"), ("two", "account"), ("second", "account")),
    ),
    IntentDef(
        "about_platform", (),
        ("about hustleke", "what is hustleke", "tell me about"),
        (("about", "hustleke"), ("what", "hustleke")),
    ),
)


GETTING_PAID_ANSWER = (
    "On HustleKE, you get paid through M-Pesa escrow. When a client hires you, they fund the escrow. Once you "
    "complete the work and the client approves it, payment is released to your M-Pesa wallet instantly, usually "
    "within seconds. The platform charges a service fee (6% Free, 4% Pro). To withdraw, go to Dashboard > Wallet."
)

RULES_ANSWER = (
    "HustleKE has community guidelines to protect all users. Key rules: keep all job communication on the "
    "platform until escrow is funded, do not share personal contacts before a contract is in place, deliver work "
    "as agreed in the proposal, do not create fake reviews or multiple accounts, and report any suspicious "
    "activity. For the full terms, visit our Terms of Service page or contact support at /contact."
)

PASSWORD_ANSWER = (
    "To change your password: go to Dashboard > Settings > Security tab. To update your email or phone: go to "
    "Dashboard > Settings > Profile tab. If you forgot your password, use the \"Forgot Password\" link on the "
    "login screen. A reset email will be sent to your registered email address."
)

TAX_ANSWER = (
    "HustleKE adds 16% VAT on service fees as required by Kenyan tax law. Freelancers are responsible for "
    "declaring their own income to KRA. Transaction history from Dashboard > Wallet can serve as your earnings "
    "record. We currently do not generate formal invoices, but you can export your transaction history for tax "
    "purposes."
)

MULTIPLE_PROJECTS_ANSWER = (
    "There is no limit on how many jobs you can take on simultaneously as a freelancer. However, make sure you "
    "can deliver quality work within the agreed timelines for each project. Overcommitting can lead to poor "
    "reviews and a lower Hustle Score. As a client, you can also post multiple jobs at once."
)

WORK_REJECTION_ANSWER = (
    "If the delivered work does not meet the agreed requirements, you can request a revision through the "
    "messaging system. If you cannot reach an agreement, open a dispute from Dashboard > Escrow. Our resolution "
    "team will review the project requirements, delivered work, and communication to make a fair decision. "
    "Escrow funds stay locked until the dispute is resolved."
)

MINIMUM_BID_ANSWER = (
    "The minimum bid amount on HustleKE is KES 100. There is no maximum limit, so you can bid whatever you "
    "believe your work is worth. Clients set their own budget ranges when posting jobs. Keep your bids "
    "competitive but fair to your skills and experience level."
)

ABOUT_ANSWER = (
    "HustleKE is Kenya's premier freelance marketplace. It connects skilled freelancers with clients who need "
    "work done. Key features include: secure M-Pesa escrow payments, identity verification, Hustle Score trust "
    "ratings, AI-powered proposal polishing, smart job matching, and plans from Free to Pro (KES 500/month) to "
    "Enterprise. Browse jobs at /jobs, find talent at /talent, or sign up free to get started."
)

# Canned answers keyed by intent name
INTENT_ANSWERS = MappingProxyType({
    "bidding_budget": (
        "Yes, you can bid more than the client's posted budget. Your bid represents the value you believe your "
        "work is worth. However, keep in mind that clients may prefer bids within their stated range. To increase "
        "your chances: explain why your higher bid is justified (specialized skills, faster delivery, better "
        "quality), reference past work that demonstrates value, and use the AI Proposal Polisher to make your "
        "case compelling. Some clients set low budgets and expect negotiation."
    ),
    "contact_sharing": (
        "We strongly advise keeping all communication on the HustleKE platform. Sharing personal contact details "
        "(phone numbers, emails, WhatsApp) before a contract is in place puts you at risk, since there is no "
        "escrow protection for off-platform agreements. Once a job is active with escrow funded, you can "
        "communicate through Dashboard > Messages. This protects both parties and creates a record in case of "
        "disputes. After successful project completion, it is your choice whether to exchange contacts for "
        "future work."
    ),
    "getting_paid": GETTING_PAID_ANSWER,
    "service_fee": (
        "HustleKE charges a service fee on completed transactions: 6% on the Free plan and 4% on the Pro plan "
        "(KES 500/month). No hidden fees."
    ),
    "escrow_system": (
        "Escrow holds funds securely until work is approved. Neither party can take it until the job is "
        "completed and the client approves."
    ),
    "wallet_topup": "Go to Dashboard > Wallet, enter your M-Pesa number and amount, then confirm via STK push.",
    "cancel_sub": (
        "Cancel anytime from Dashboard > Settings > Subscription. You keep Pro benefits until your current "
        "billing period ends."
    ),
    "hustle_score": (
        "Hustle Score (0-100) is based on completed jobs, reviews, response time, verification, and activity. "
        "Higher scores = more visibility."
    ),
    "writing_proposals": (
        "Address specific client needs, showcase relevant work, set a competitive bid, be clear on timeline, and "
        "use the AI Proposal Polisher."
    ),
    "dispute_process": (
        "Open a dispute from Dashboard > Escrow. Our team reviews evidence within 48 hours. Funds stay safe until "
        "resolved."
    ),
    "hidden_fees": (
        "No hidden fees. The service fee (6% Free / 4% Pro) is the only platform charge. M-Pesa withdrawal fees "
        "may apply from Safaricom."
    ),
    "pro_plan": (
        "Pro costs KES 500/month: 4% fee, 20 proposals/day, priority matching, analytics, PRO badge. Try code "
        "EARLYBIRD for free first month."
    ),
    "verification": (
        "Go to Dashboard > Settings, upload national ID or passport. Most verifications complete within 24 hours."
    ),
    "profile_update": (
        "Go to Dashboard > Settings > Profile tab to update name, bio, skills, hourly rate, education, "
        "certifications, and portfolio."
    ),
    "client_no_response": (
        "Send a polite follow-up after 3 days. If no response after 7 days, withdraw your proposal (count is "
        "restored) and apply elsewhere."
    ),
    "data_security": (
        "Yes. Bank-level encryption, Row Level Security, rate limiting. We never share personal data with third "
        "parties."
    ),
    "free_trial": (
        "Use promo code EARLYBIRD for a free first month of Pro. Apply it in Dashboard > Settings > Subscription."
    ),
    "payment_methods": (
        "Currently all payments are via M-Pesa. Top up and withdraw through your M-Pesa number. Bank transfers "
        "coming soon."
    ),
    "proposal_limits": (
        "Free plan: 10 proposals/day. Pro plan: 20/day. Enterprise: unlimited. Withdrawn proposals restore your "
        "daily count."
    ),
    "tax_earnings": TAX_ANSWER,
    "multiple_projects": MULTIPLE_PROJECTS_ANSWER,
    "work_rejection": WORK_REJECTION_ANSWER,
    "rules_policies": RULES_ANSWER,
    "password_account": PASSWORD_ANSWER,
    "minimum_bid": MINIMUM_BID_ANSWER,
    "multiple_accounts": (
        "Each user should have only one HustleKE account. Creating multiple accounts to bypass proposal limits "
        "or manipulate reviews violates our terms of service and can result in account suspension. If you need "
        "to switch between freelancer and client roles, you can do both from the same account."
    ),
    "about_platform": ABOUT_ANSWER,
})
