"""Word banks for company/startup names."""

from typing import Optional, Tuple

from . import WordBank


SUFFIXES = WordBank({
    # Tech/Modern
    'tech': ['ify', 'ly', 'io', 'ai', 'app', 'hub', 'lab', 'labs', 'tech', 'base', 'bit', 'byte',
             'data', 'sync', 'flow', 'stack', 'grid', 'mesh', 'node', 'pod', 'box', 'kit', 'ops'],
    'action': ['er', 'or', 'ist', 'ize', 'ify', 'able', 'ible', 'ment', 'tion', 'sion', 'ness', 'ing'],
    'modern': ['ly', 'ify', 'io', 'co', 'hq', 'up', 'go', 'so', 'do', 'be', 'me', 'we', 'os',
               'ex', 'ix', 'ax', 'ox', 'ux'],
    # Latin/Scientific
    'latin': ['ium', 'ia', 'us', 'um', 'is', 'ex', 'ix', 'ax', 'ox', 'ux', 'ara', 'era', 'ora',
              'ura', 'ana', 'ena', 'ina', 'ona', 'una'],
    # Premium/Enterprise
    'premium': ['prime', 'plus', 'pro', 'max', 'one', 'first', 'elite', 'select', 'premium',
                'gold', 'platinum'],
    'nature': ['leaf', 'tree', 'bloom', 'seed', 'root', 'vine', 'wave', 'cloud', 'sky', 'sun',
               'moon', 'star', 'river', 'lake', 'ocean', 'peak', 'ridge', 'valley'],
    'social': ['tribe', 'club', 'crew', 'squad', 'team', 'guild', 'circle', 'group', 'network',
               'community', 'collective'],
    'place': ['space', 'place', 'spot', 'zone', 'area', 'realm', 'world', 'land', 'city', 'town',
              'port', 'point', 'station', 'depot', 'dock'],
    'scale': ['all', 'every', 'any', 'multi', 'omni', 'pan', 'uni', 'mega', 'giga', 'ultra',
              'hyper', 'super', 'meta'],
}, default='modern')


PREFIXES = WordBank({
    'tech': ['cyber', 'digi', 'info', 'data', 'cloud', 'smart', 'auto', 'robo', 'tech', 'net',
             'web', 'app', 'code', 'dev', 'api'],
    'quality': ['pure', 'true', 'real', 'prime', 'ace', 'top', 'best', 'super', 'ultra', 'hyper',
                'mega', 'giga'],
    # Speed/Motion
    'motion': ['quick', 'fast', 'swift', 'rapid', 'flash', 'zoom', 'rush', 'dash', 'bolt',
               'turbo', 'jet', 'rocket'],
    'simple': ['easy', 'simple', 'clear', 'clean', 'plain', 'basic', 'core', 'bare', 'lean',
               'slim', 'lite'],
    'fresh': ['new', 'neo', 'nova', 'next', 'fresh', 'bright', 'spark', 'glow', 'shine', 'ray'],
    'action': ['go', 'get', 'try', 'do', 'be', 'use', 'run', 'fly', 'jump', 'leap', 'move',
               'shift', 'lift'],
    'open': ['open', 'free', 'fair', 'equal', 'shared', 'public', 'common', 'mutual', 'joint',
             'unified'],
    'scale': ['all', 'every', 'any', 'multi', 'omni', 'pan', 'uni', 'total', 'full', 'complete',
              'whole'],
}, default='quality')


INDUSTRY_WORDS = WordBank({
    'fintech': ['pay', 'cash', 'money', 'coin', 'bank', 'fund', 'trade', 'invest', 'wealth',
                'credit', 'debit', 'finance', 'capital', 'asset', 'stock', 'bond', 'loan', 'save',
                'spend', 'budget', 'wallet', 'ledger', 'vault', 'mint'],
    'healthtech': ['health', 'care', 'med', 'doc', 'cure', 'heal', 'well', 'fit', 'vital',
                   'pulse', 'heart', 'life', 'body', 'mind', 'therapy', 'clinic', 'nurse',
                   'pharma', 'bio', 'gene', 'cell', 'immune'],
    'edtech': ['learn', 'teach', 'edu', 'school', 'course', 'class', 'study', 'skill', 'tutor',
               'mentor', 'quiz', 'test', 'grade', 'book', 'knowledge', 'wisdom', 'brain', 'mind',
               'think', 'read', 'write', 'speak'],
    'saas': ['cloud', 'app', 'soft', 'tool', 'platform', 'system', 'suite', 'hub', 'base',
             'stack', 'flow', 'sync', 'auto', 'smart', 'dash', 'board', 'report', 'track',
             'manage', 'monitor', 'control', 'optimize'],
    'ecommerce': ['shop', 'store', 'buy', 'sell', 'cart', 'order', 'ship', 'deliver', 'market',
                  'trade', 'deal', 'offer', 'price', 'sale', 'retail', 'product', 'item',
                  'catalog', 'inventory', 'checkout', 'basket'],
    'social': ['connect', 'share', 'chat', 'talk', 'meet', 'friend', 'follow', 'like', 'post',
               'feed', 'stream', 'group', 'community', 'social', 'network', 'tribe', 'circle',
               'link', 'bond', 'unite'],
    'productivity': ['work', 'task', 'project', 'plan', 'goal', 'team', 'flow', 'focus', 'time',
                     'schedule', 'calendar', 'note', 'doc', 'file', 'organize', 'manage', 'track',
                     'progress', 'achieve', 'complete', 'done'],
    'ai': ['ai', 'ml', 'neural', 'deep', 'learn', 'model', 'predict', 'smart', 'auto', 'bot',
           'agent', 'cognitive', 'intelligent', 'brain', 'mind', 'think', 'reason', 'logic',
           'data', 'algorithm'],
    'security': ['secure', 'safe', 'protect', 'guard', 'shield', 'vault', 'lock', 'key', 'trust',
                 'verify', 'auth', 'encrypt', 'defend', 'watch', 'alert', 'detect', 'prevent',
                 'block', 'firewall', 'cyber'],
    'marketing': ['brand', 'market', 'grow', 'reach', 'engage', 'convert', 'lead', 'funnel',
                  'campaign', 'content', 'social', 'email', 'ad', 'promo', 'influence', 'viral',
                  'buzz', 'boost', 'launch', 'scale'],
    'hr': ['team', 'talent', 'hire', 'recruit', 'people', 'human', 'staff', 'employee', 'work',
           'career', 'job', 'role', 'culture', 'engage', 'perform', 'review', 'grow', 'train',
           'develop', 'retain'],
    'logistics': ['ship', 'deliver', 'track', 'route', 'fleet', 'cargo', 'freight', 'logistics',
                  'supply', 'chain', 'warehouse', 'inventory', 'order', 'fulfill', 'dispatch',
                  'transit', 'package', 'load', 'transport'],
    'general': ['simple', 'easy', 'fast', 'quick', 'smart', 'bright', 'clear', 'clean', 'fresh',
                'new', 'next', 'first', 'prime', 'core', 'pure', 'true', 'real', 'open', 'free',
                'fair'],
}, default='general')


POSITIVE_WORDS: Tuple[str, ...] = (
    'spark', 'shine', 'glow', 'bright', 'brilliant', 'radiant', 'vivid', 'vibrant',
    'swift', 'agile', 'nimble', 'sleek', 'smooth', 'fluid', 'flow',
    'leap', 'soar', 'rise', 'lift', 'elevate', 'ascend', 'peak', 'summit',
    'bold', 'brave', 'strong', 'mighty', 'power', 'force', 'drive',
    'wise', 'sage', 'smart', 'clever', 'sharp', 'keen', 'astute',
    'trust', 'true', 'loyal', 'honest', 'fair', 'just', 'noble',
    'harmony', 'balance', 'unity', 'sync', 'align', 'blend', 'merge',
    'craft', 'forge', 'build', 'create', 'make', 'shape', 'form',
    'discover', 'explore', 'venture', 'quest', 'journey', 'path',
    'grow', 'bloom', 'flourish', 'thrive', 'prosper', 'succeed',
)


def get_all_suffixes() -> Tuple[str, ...]:
    return SUFFIXES.flatten()


def get_all_prefixes() -> Tuple[str, ...]:
    return PREFIXES.flatten()


def get_industry_words(industry: Optional[str] = None) -> Tuple[str, ...]:
    """Industry-specific words, falling back to ``general``."""
    return INDUSTRY_WORDS.lookup(industry)
