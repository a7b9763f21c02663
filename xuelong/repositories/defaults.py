"""Seed content written the first time a document is missing from the store."""

from __future__ import annotations

COMPANY = "company"
FOUNDER = "founder"
INTRO = "intro"
AI_RESOURCES = "ai-resources"
SERVICES = "services"
CAROUSEL = "core-service-carousel"
NEWS = "news"
POSTS = "posts"
PARTNERS = "partners"

_SEED_TIME = "2024-01-01T00:00:00+00:00"

DEFAULT_COMPANY = {
    "id": 1,
    "name": "XUELONG AI",
    "subtitle": "雪珑人工智能设计工作室",
    "slogan": "引领智能工作新方式",
    "description": "专注于人工智能技术研发与应用的创新型工作室",
    "address": "北京市海淀区中关村科技园",
    "phone": "400-888-9999",
    "email": "contact@xuelongai.com",
    "updatedAt": _SEED_TIME,
}

DEFAULT_FOUNDER = {
    "id": 1,
    "name": "张雪珑",
    "title": "创始人 & 首席技术官",
    "description": "专注AI技术研发10余年，曾担任AI架构师。",
    "photo": "/founder-photo.svg",
    "updatedAt": _SEED_TIME,
}

DEFAULT_INTRO = {
    "id": 1,
    "paragraphs": [
        "雪珑AI工作室致力于推动人工智能技术的前沿发展，专注于机器学习、深度学习、自然语言处理等核心技术领域。",
    ],
    "updatedAt": _SEED_TIME,
}


def _resource(id_: int, name: str, description: str, category: str, url: str) -> dict:
    return {
        "id": id_,
        "name": name,
        "description": description,
        "category": category,
        "url": url,
        "isActive": True,
        "createdAt": _SEED_TIME,
    }


DEFAULT_AI_RESOURCES = [
    _resource(1, "ChatGPT", "智能对话助手，支持多轮对话和代码生成", "对话AI", "https://chat.openai.com"),
    _resource(2, "Claude", "高质量文本分析和创作工具", "文本AI", "https://claude.ai"),
    _resource(3, "Midjourney", "专业AI图像生成和艺术创作平台", "图像AI", "https://midjourney.com"),
    _resource(4, "PyTorch", "深度学习研究和生产部署平台", "开发框架", "https://pytorch.org"),
]


def _service(id_: int, title: str, description: str, icon: str, features: list[str]) -> dict:
    return {
        "id": id_,
        "title": title,
        "description": description,
        "icon": icon,
        "templateType": "vertical",
        "features": features,
        "posterImage": None,
        "posterImages": [],
        "isActive": True,
        "order": id_,
        "createdAt": _SEED_TIME,
    }


DEFAULT_SERVICES = [
    _service(1, "专业AI培训", "从基础到进阶，全面的人工智能课程体系", "Code", ["基础理论课程", "实战项目训练", "专家一对一指导"]),
    _service(2, "定制项目开发", "量身打造的AI解决方案，满足您的业务需求", "Monitor", ["需求分析", "方案设计", "开发实施", "部署维护"]),
    _service(3, "校企合作", "与高等院校建立深度合作关系，共同推进AI人才培养", "Award", ["课程共建", "实习基地", "科研合作"]),
]

DEFAULT_CAROUSEL = {
    "id": 1,
    "title": "核心服务轮播图片",
    "images": [],
    "isActive": True,
    "autoPlay": True,
    "interval": 3000,
    "createdAt": _SEED_TIME,
    "updatedAt": _SEED_TIME,
}


def _news(id_: int, content: str, type_: str) -> dict:
    return {
        "id": id_,
        "content": content,
        "type": type_,
        "priority": id_,
        "isActive": True,
        "createdAt": _SEED_TIME,
    }


DEFAULT_NEWS = {
    "news": [
        _news(1, "雪珑AI荣获2024年度最佳AI设计工作室奖", "award"),
        _news(2, "新推出智能UI设计助手，提升设计效率300%", "product"),
        _news(3, "与知名企业达成战略合作，共建AI设计生态", "partnership"),
    ],
    "settings": {
        "scrollSpeed": 30,
        "maxDisplayItems": 5,
        "autoRefresh": True,
        "refreshInterval": 300000,
    },
}

DEFAULT_POSTS = [
    {
        "id": 1,
        "title": "XUELONG AI 深度学习框架发布",
        "content": "我们很高兴地宣布XUELONG AI深度学习框架正式发布，为开发者提供更强大的AI开发工具。",
        "author": "XUELONG AI团队",
        "createdAt": "2024-01-15T00:00:00+00:00",
        "image": None,
        "published": True,
    },
]

DEFAULT_PARTNERS = [
    {"id": 1, "name": "清华大学", "description": "人工智能研究合作伙伴", "logo": None, "website": "https://www.tsinghua.edu.cn"},
    {"id": 2, "name": "北京大学", "description": "机器学习联合实验室", "logo": None, "website": "https://www.pku.edu.cn"},
    {"id": 3, "name": "中科院", "description": "深度学习技术研发", "logo": None, "website": "https://www.cas.cn"},
]
