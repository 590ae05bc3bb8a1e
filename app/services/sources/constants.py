from typing import Final

from app.models.profile import Category

# Search topics used by repository search sources
CATEGORY_SEARCH_TOPICS: Final[dict[Category, list[str]]] = {
    Category.AI_TOOLS: ["ai", "artificial-intelligence", "machine-learning", "llm", "chatgpt", "gpt"],
    Category.PRODUCTIVITY: ["productivity", "automation", "workflow", "tools", "utilities"],
    Category.WELLNESS: ["health", "fitness", "wellness", "meditation", "mindfulness", "mental-health"],
    Category.EDUCATION: ["education", "learning", "tutorial", "course", "teaching"],
    Category.CRYPTO: ["blockchain", "web3", "crypto", "ethereum", "solana", "defi", "smart-contracts"],
    Category.LIFESTYLE: ["lifestyle", "travel", "food", "photography", "personal"],
    Category.DESIGN: ["design", "ui", "ux", "figma", "design-tools", "creative"],
    Category.DEVELOPMENT: ["developer-tools", "devtools", "cli", "sdk", "library", "framework"],
    Category.MARKETING: ["marketing", "seo", "analytics", "growth", "content"],
    Category.FINANCE: ["finance", "fintech", "trading", "investing", "budgeting"],
}
