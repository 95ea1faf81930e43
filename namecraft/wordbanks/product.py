"""Word banks for SaaS products, features, and pricing tiers."""

from typing import Optional, Tuple

from . import WordBank


PRODUCT_SUFFIXES = WordBank({
    'action': ['er', 'or', 'r', 'izer', 'ator', 'ifier', 'maker', 'builder', 'manager',
               'tracker', 'finder', 'keeper', 'watcher', 'master'],
    'tech': ['hub', 'base', 'desk', 'board', 'space', 'vault', 'box', 'kit', 'suite', 'cloud',
             'stack', 'flow', 'sync', 'link', 'point', 'port'],
    'app': ['app', 'io', 'ly', 'ify', 'ize', 'go', 'now', 'up', 'it', 'me', 'us', 'os', 'ai'],
    'platform': ['platform', 'system', 'engine', 'studio', 'works', 'forge', 'craft', 'labs',
                 'central', 'command'],
    # Premium tiers
    'premium': ['pro', 'plus', 'max', 'prime', 'elite', 'premium', 'enterprise', 'business',
                'team', 'unlimited'],
    # Version indicators
    'version': ['2', '3', 'x', 'next', 'neo', 'nova', 'ultra', 'super', 'mega', 'hyper'],
}, default='tech')


PRODUCT_PREFIXES = WordBank({
    'action': ['auto', 'quick', 'fast', 'smart', 'easy', 'instant', 'rapid', 'swift', 'speed',
               'turbo'],
    'quality': ['super', 'ultra', 'mega', 'hyper', 'pro', 'power', 'prime', 'ace', 'top', 'best'],
    'scope': ['all', 'every', 'any', 'multi', 'omni', 'total', 'full', 'complete', 'unified',
              'central'],
    'simple': ['one', 'simple', 'easy', 'clear', 'clean', 'pure', 'bare', 'lean', 'slim', 'lite'],
    'tech': ['cyber', 'digi', 'cloud', 'data', 'info', 'net', 'web', 'api', 'code', 'dev'],
    'innovation': ['new', 'neo', 'nova', 'next', 'fresh', 'bright', 'smart', 'wise'],
}, default='action')


CATEGORY_WORDS = WordBank({
    'analytics': ['metric', 'insight', 'report', 'chart', 'graph', 'dash', 'data', 'stat',
                  'trend', 'measure', 'track', 'analyze', 'monitor', 'view', 'score', 'pulse'],
    'crm': ['lead', 'contact', 'deal', 'pipe', 'sales', 'prospect', 'client', 'customer',
            'account', 'opportunity', 'relation', 'engage', 'convert', 'nurture', 'close'],
    'projectManagement': ['task', 'project', 'plan', 'board', 'sprint', 'agile', 'kanban',
                          'milestone', 'timeline', 'schedule', 'assign', 'track', 'deliver',
                          'ship', 'launch'],
    'communication': ['chat', 'talk', 'meet', 'call', 'message', 'ping', 'notify', 'alert',
                      'share', 'connect', 'sync', 'collaborate', 'discuss', 'thread', 'channel'],
    'documentation': ['doc', 'wiki', 'note', 'page', 'write', 'edit', 'draft', 'publish',
                      'version', 'knowledge', 'content', 'article', 'guide', 'manual',
                      'reference'],
    'automation': ['auto', 'flow', 'trigger', 'action', 'rule', 'bot', 'script', 'macro',
                   'workflow', 'process', 'integrate', 'connect', 'sync', 'schedule', 'batch'],
    'security': ['guard', 'shield', 'secure', 'protect', 'defend', 'watch', 'scan', 'detect',
                 'alert', 'vault', 'lock', 'key', 'trust', 'verify', 'auth'],
    'finance': ['pay', 'bill', 'invoice', 'expense', 'budget', 'cash', 'fund', 'account',
                'ledger', 'book', 'profit', 'revenue', 'cost', 'spend', 'money'],
    'hr': ['hire', 'recruit', 'talent', 'team', 'people', 'staff', 'employee', 'perform',
           'review', 'train', 'onboard', 'culture', 'engage', 'retain', 'grow'],
    'marketing': ['campaign', 'email', 'social', 'content', 'brand', 'promote', 'reach',
                  'engage', 'convert', 'lead', 'funnel', 'audience', 'target', 'segment',
                  'launch'],
    'design': ['canvas', 'pixel', 'sketch', 'draw', 'create', 'design', 'layout', 'frame',
               'layer', 'style', 'theme', 'color', 'shape', 'visual', 'graphic'],
    'storage': ['file', 'store', 'save', 'backup', 'archive', 'vault', 'drive', 'cloud', 'sync',
                'share', 'folder', 'space', 'box', 'locker', 'depot'],
    'scheduling': ['schedule', 'calendar', 'book', 'slot', 'time', 'date', 'event', 'meet',
                   'plan', 'reserve', 'available', 'free', 'busy', 'block', 'remind'],
    'support': ['help', 'support', 'ticket', 'issue', 'request', 'service', 'desk', 'center',
                'assist', 'resolve', 'answer', 'guide', 'faq', 'knowledge', 'chat'],
}, default='projectManagement')


TIER_NAMES = WordBank({
    'freemium': ['Free', 'Starter', 'Basic', 'Lite', 'Personal', 'Hobby', 'Explorer'],
    'professional': ['Pro', 'Professional', 'Plus', 'Growth', 'Standard', 'Essential', 'Core'],
    'business': ['Business', 'Team', 'Company', 'Organization', 'Scale', 'Advanced'],
    'enterprise': ['Enterprise', 'Enterprise Plus', 'Ultimate', 'Max', 'Unlimited', 'Custom'],
}, default='freemium')


ACTION_VERBS: Tuple[str, ...] = (
    'track', 'manage', 'create', 'build', 'design', 'analyze', 'report', 'share',
    'connect', 'sync', 'automate', 'integrate', 'schedule', 'organize', 'plan',
    'monitor', 'alert', 'notify', 'find', 'search', 'filter', 'sort', 'export',
    'import', 'backup', 'restore', 'secure', 'protect', 'encrypt', 'verify',
    'approve', 'review', 'assign', 'delegate', 'collaborate', 'communicate',
)

DESCRIPTIVE_ADJECTIVES: Tuple[str, ...] = (
    'smart', 'quick', 'fast', 'easy', 'simple', 'instant', 'auto', 'advanced',
    'powerful', 'flexible', 'custom', 'dynamic', 'real-time', 'seamless',
    'integrated', 'unified', 'centralized', 'secure', 'reliable', 'scalable',
)


def get_category_words(category: Optional[str] = None) -> Tuple[str, ...]:
    """Category words, falling back to project management."""
    return CATEGORY_WORDS.lookup(category)


def get_tier_names(model: str = 'all') -> Tuple[str, ...]:
    """Tier names for a pricing model; ``all`` concatenates every model."""
    if model == 'all':
        return TIER_NAMES.flatten()
    return TIER_NAMES.lookup(model)
